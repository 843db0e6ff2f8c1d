from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_journal.attendance_journal.database import bootstrap

logger = logging.getLogger("attendance_journal.manage_db")

DATABASE_DIR = REPO_ROOT / "database"
DEMO_ACCOUNTS = "teacher@example.com / teacher123, student@example.com / student123"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prepare the attendance journal MySQL database.")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("init", help="Create the database if needed and apply schema.sql.")
    seed = sub.add_parser("seed", help="Load seed.sql and the demo login accounts.")
    seed.add_argument("--with-schema", action="store_true", help="Apply schema.sql before seeding.")
    sub.add_parser("tables", help="List tables in the configured database.")
    return parser.parse_args(argv)


def describe(db_config: dict) -> str:
    return (
        f"{db_config.get('user')}@{db_config.get('host')}:"
        f"{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


def run(args: argparse.Namespace, db_config: dict) -> list[str]:
    if args.command == "init" or getattr(args, "with_schema", False):
        bootstrap.apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("applied schema.sql to %s", describe(db_config))

    if args.command == "seed":
        bootstrap.apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        bootstrap.ensure_demo_users(db_config)
        logger.info("seeded %s (%s)", describe(db_config), DEMO_ACCOUNTS)

    return bootstrap.list_tables(db_config)


def main(argv: Optional[Sequence[str]] = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)
    settings = importlib.import_module(get_settings_module())

    tables = run(args, dict(settings.DB_CONFIG))
    print(f"{describe(dict(settings.DB_CONFIG))}: {len(tables)} table(s)")
    if args.command == "tables":
        for name in tables:
            print(f"  {name}")


if __name__ == "__main__":
    main()
