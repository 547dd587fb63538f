"""Settings shared by every environment module."""
import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_contributions"),
    "pool_size": int(os.getenv("DB_POOL_SIZE", "5")),
}

APP_PORT = int(os.getenv("APP_PORT", "3000"))

# SPA is served from another origin during development.
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "*")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
