from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.overtime_tracker.overtime_tracker.database.bootstrap import apply_schema, list_tables

EXPECTED_TABLES = ("profiles", "employees", "holidays", "overtime_records")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    schema_path = REPO_ROOT / "database" / "schema.sql"
    apply_schema(db_config, schema_path=schema_path)
    tables = set(list_tables(db_config))
    missing = [t for t in EXPECTED_TABLES if t not in tables]
    if missing:
        raise SystemExit(f"Schema applied but tables are missing: {', '.join(missing)}")
    print(f"Database {db_config.get('database')} ready: {', '.join(EXPECTED_TABLES)}")


if __name__ == "__main__":
    main()
