import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_attendance"),
}

# Minutes past a shift's own arrival delay before an arrival counts as Absent
OUTER_GRACE_MINUTES = int(os.getenv("OUTER_GRACE_MINUTES", "240"))
# Leaving more than this many minutes before shift end turns Present into Half Day
EARLY_DEPARTURE_MINUTES = int(os.getenv("EARLY_DEPARTURE_MINUTES", "60"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
