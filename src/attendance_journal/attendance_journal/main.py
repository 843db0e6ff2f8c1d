from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .access.controller import register as register_access
from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .core.constants import TOKEN_TTL_SECONDS
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .schedules.controller import register as register_schedules
from .users.controller import register as register_users

logger = logging.getLogger("attendance_journal")

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    ``container`` lets callers (tests, scripts) supply pre-wired services;
    otherwise one is built against the configured MySQL database.
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        jwt_secret = getattr(settings, "JWT_SECRET", None)
        if not jwt_secret:
            raise RuntimeError("JWT_SECRET is not configured; set it in the environment")

        db_config = dict(getattr(settings, "DB_CONFIG"))
        db_config.setdefault("pool_size", int(getattr(settings, "DB_POOL_SIZE", 0)))
        logger.debug(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.debug("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            ensure_demo_users(db_config)
            logger.debug("demo seed ready")

        container = build_container(
            db_config=db_config,
            jwt_secret=jwt_secret,
            token_ttl_seconds=int(getattr(settings, "TOKEN_TTL_SECONDS", TOKEN_TTL_SECONDS)),
        )

    register_error_handlers(app)
    register_users(app, container)
    register_schedules(app, container)
    register_attendance(app, container)
    register_access(app, container)

    return app
