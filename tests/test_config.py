import importlib

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("dev", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_testing_settings_use_default_thresholds():
    settings = importlib.import_module("config.testing")

    assert settings.OUTER_GRACE_MINUTES == 240
    assert settings.EARLY_DEPARTURE_MINUTES == 60
    assert settings.DB_CONFIG["database"]
