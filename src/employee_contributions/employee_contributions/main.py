from __future__ import annotations

import importlib
from typing import Optional

import structlog
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import register as register_http
from .common.logging_setup import setup_logging
from .container import Container, build_container
from .contributions.controller import register as register_contributions
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees

logger = structlog.get_logger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    A prebuilt container can be passed in (tests); otherwise one is built from
    the settings module selected by APP_ENV.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = dict(getattr(settings, "DB_CONFIG"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    setup_logging(
        getattr(settings, "LOG_LEVEL", "INFO"),
        json_logs=bool(getattr(settings, "JSON_LOGS", False)),
    )
    logger.info(
        "app_starting",
        settings=settings_module,
        db=f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema_ready", tables=len(list_tables(db_config)))
        container = build_container(db_config=db_config)

    register_http(app, cors_origin=getattr(settings, "CORS_ORIGIN", "*"))
    register_employees(app, container)
    register_contributions(app, container)

    return app
