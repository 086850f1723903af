from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_sql_file, ensure_demo_user, list_tables
from .lectures.controller import register as register_lectures
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Pass `container` to run against other repository implementations (tests use
    in-memory ones); otherwise MySQL repositories are built from the settings module.
    """
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"))

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")).upper())

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    project_future_sessions = bool(getattr(settings, "PROJECT_FUTURE_SESSIONS", False))
    app.config["PROJECT_FUTURE_SESSIONS"] = project_future_sessions

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(db_config=db_config, project_future_sessions=project_future_sessions)

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_user(container.conn)
            apply_sql_file(container.conn, path=REPO_ROOT / "database" / "seed.sql")
            logger.info("demo seed ready")
    else:
        logger.info("settings=%s (injected container)", settings_module)

    app.extensions["attendance_tracker"] = container

    register_users(app, container)
    register_lectures(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
