import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "bfp_villanueva_test"),
}

LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH", "instance/local_store_test.json")

ADMIN_USERNAME = "admin"

LOG_LEVEL = "WARNING"

THEME_COOKIE_MAX_AGE = 3600

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
