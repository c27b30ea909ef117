from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import register_error_handlers
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables

from .container import Container, build_container
from .assistant.controller import register as register_assistant
from .dashboard.controller import register as register_dashboard
from .reports.controller import register as register_reports
from .store.controller import register as register_store
from .users.controller import register as register_users

log = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    Without ``container`` the MySQL-backed one is built from the selected
    settings module (and the schema/seed applied when enabled).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        container = _build_from_settings(settings, settings_module)

    register_error_handlers(app)
    register_users(app, container)
    register_dashboard(app, container)
    register_store(app, container)
    register_reports(app, container)
    register_assistant(app, container)

    return app


def _build_from_settings(settings, settings_module: str) -> Container:
    db_config = getattr(settings, "DB_CONFIG")
    log.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        log.info("Schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        ensure_demo_users(db_config)
        log.info("Demo seed ready")

    container = build_container(
        db_config=db_config,
        pool_size=int(getattr(settings, "DB_POOL_SIZE", 5)),
        pool_timeout=float(getattr(settings, "DB_POOL_TIMEOUT", 10.0)),
        tz_name=getattr(settings, "TIMEZONE", None),
        openai_api_key=getattr(settings, "OPENAI_API_KEY", None),
        assistant_model=getattr(settings, "ASSISTANT_MODEL", "gpt-4o-mini"),
        report_brand=getattr(settings, "REPORT_BRAND", "NEMI NAVIGATOR"),
    )
    atexit.register(container.conn.close)
    return container
