from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from sqlalchemy import create_engine, inspect  # noqa: E402

from careerhub.config import build_sqlalchemy_db_url, settings  # noqa: E402
from careerhub.database import Base, mask_db_url  # noqa: E402
import careerhub.models  # noqa: F401,E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Create missing careerhub tables and report which ones already existed."
    )
    parser.add_argument("--db-url", default=None, help="Target DB URL (defaults to the configured one)")
    parser.add_argument("--dry-run", action="store_true", help="Only report which tables would be created")
    parser.add_argument(
        "--i-understand",
        action="store_true",
        help="Required unless --dry-run; DDL runs against the target DB.",
    )
    args = parser.parse_args(argv)

    if not (args.dry_run or args.i_understand):
        print("Refusing to run DDL without --i-understand (use --dry-run to preview).")
        return 2

    url = args.db_url or build_sqlalchemy_db_url(settings)
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, pool_pre_ping=True, future=True, connect_args=connect_args)

    existing = set(inspect(engine).get_table_names())
    missing = [table for table in Base.metadata.sorted_tables if table.name not in existing]

    print("target:", mask_db_url(url))
    for table in Base.metadata.sorted_tables:
        print(f"  {'exists ' if table.name in existing else 'missing'} {table.name}")

    if args.dry_run or not missing:
        print(f"{len(missing)} table(s) to create" + (" (dry run)" if args.dry_run else ""))
        return 0

    Base.metadata.create_all(bind=engine, tables=missing)
    print("created:", ", ".join(table.name for table in missing))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
