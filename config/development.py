import os

from .config import APP_PORT, CORS_ORIGIN, DB_CONFIG, LOG_LEVEL  # noqa: F401

DEBUG = True
JSON_LOGS = False

# If enabled, app will apply database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
