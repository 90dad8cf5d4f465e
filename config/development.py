import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "bfp_villanueva"),
}

# Secondary JSON store used by the placement, promotion and leave records screens
LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "instance/local_store.json")

# Name recorded as approver on leave decisions
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

THEME_COOKIE_MAX_AGE = int(os.getenv("THEME_COOKIE_MAX_AGE", str(365 * 24 * 3600)))

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
