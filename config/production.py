import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "bfp_villanueva"),
}

LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "/var/lib/bfp-personnel/local_store.json")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

THEME_COOKIE_MAX_AGE = int(os.getenv("THEME_COOKIE_MAX_AGE", str(365 * 24 * 3600)))

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
