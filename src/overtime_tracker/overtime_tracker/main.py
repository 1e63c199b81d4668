from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.logging_config import setup_logging
from .common.web import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_admin_profile, list_tables
from .employees.controller import register as register_employees
from .holidays.controller import register as register_holidays
from .imports.controller import register as register_imports
from .overtime.controller import register as register_overtime
from .payroll.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app() -> Flask:
    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_BYTES", 10 * 1024 * 1024))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        ensure_admin_profile(db_config, username=settings.ADMIN_USERNAME, password=settings.ADMIN_PASSWORD)
        logger.info("demo seed ready")

    register_routes(app, build_container(db_config=db_config))
    return app


def register_routes(app: Flask, container: Container) -> None:
    register_error_handlers(app)
    register_users(app, container)
    register_employees(app, container)
    register_holidays(app, container)
    register_overtime(app, container)
    register_imports(app, container)
    register_reports(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return {"status": "ok"}
