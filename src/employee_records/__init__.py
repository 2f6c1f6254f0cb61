"""Employee Records package.

A thin Flask CRUD gateway over a pluggable document store (``employees``)
and a client-side view-state controller that drives it (``client``).
"""
from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging import get_logger, setup_logging
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees

logger = get_logger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["HOST"] = getattr(settings, "HOST", "127.0.0.1")
    app.config["PORT"] = int(getattr(settings, "PORT", 5000))
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        store_backend = str(getattr(settings, "STORE_BACKEND", "memory")).lower()
        db_config = getattr(settings, "DB_CONFIG", None)
        logger.info("settings=%s store=%s", settings_module, store_backend)

        if store_backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.debug("tables=%s", list_tables(db_config))

        container = build_container(store_backend=store_backend, db_config=db_config)

    register_employees(app, container)

    return app
