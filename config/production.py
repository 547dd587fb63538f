import os

from .config import APP_PORT, CORS_ORIGIN, DB_CONFIG, LOG_LEVEL  # noqa: F401

DEBUG = False
JSON_LOGS = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
