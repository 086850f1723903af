from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv

from config import get_settings_module

from attendance_tracker.database.bootstrap import DEMO_PASSWORD, DEMO_USERNAME, apply_sql_file, ensure_demo_user
from attendance_tracker.database.connection import DBConfig, DatabaseConnection

logger = logging.getLogger("seed_db")


def main() -> None:
    logging.basicConfig(level="INFO", format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(dict(settings.DB_CONFIG)))

    user_id = ensure_demo_user(conn)
    seed_path = Path(__file__).resolve().parents[1] / "database" / "seed.sql"
    apply_sql_file(conn, path=seed_path)

    logger.info("Seeded demo account %s/%s (user_id=%s)", DEMO_USERNAME, DEMO_PASSWORD, user_id)


if __name__ == "__main__":
    main()
