import os

from .config import APP_PORT, CORS_ORIGIN, LOG_LEVEL  # noqa: F401

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_contributions_test"),
    "pool_size": 2,
}

DEBUG = False
TESTING = True
JSON_LOGS = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
