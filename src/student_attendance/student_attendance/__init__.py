"""Student attendance tracker package.

Organized by feature modules (users, timetable, holidays, attendance, ...)
with a thin Flask controller layer over service/repository layers.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .common.log_config import configure_logging
from .container import Container, build_container
from .database.connection import DBConfig
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_student, list_tables
from .account.controller import register as register_account
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .holidays.controller import register as register_holidays
from .timetable.controller import register as register_timetable
from .users.context import bind_auth_context
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = [
    "authorization",
    "x-client-info",
    "apikey",
    "content-type",
]


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", None))

    CORS(
        app,
        resources={r"/api/*": {}, r"/functions/*": {}},
        origins=getattr(settings, "CORS_ORIGINS", "*"),
        send_wildcard=True,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

        database_dir = Path(__file__).resolve().parents[3] / "database"
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=database_dir / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=database_dir / "seed.sql")
            ensure_demo_student(db_config)
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            secret_key=app.secret_key,
            token_ttl_minutes=int(getattr(settings, "TOKEN_TTL_MINUTES", 60)),
        )

    app.extensions["container"] = container
    bind_auth_context(app, container.auth_service.resolve_token)

    register_users(app, container)
    register_dashboard(app, container)
    register_timetable(app, container)
    register_holidays(app, container)
    register_attendance(app, container)
    register_account(app, container)

    return app
