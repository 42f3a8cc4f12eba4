from __future__ import annotations

from typing import Any

from ..core.exceptions import MissingRequiredFieldError


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_present(**fields: Any) -> None:
    """Raise MissingRequiredFieldError naming every absent field."""
    missing = [name for name, value in fields.items() if _is_missing(value)]
    if missing:
        raise MissingRequiredFieldError(*missing)


def require_any(**fields: Any) -> None:
    """At least one of the given fields must be present."""
    if all(_is_missing(value) for value in fields.values()):
        raise MissingRequiredFieldError(" or ".join(fields))
