from __future__ import annotations

import argparse
import sys
from datetime import timedelta
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from careerhub.database import Base, SessionLocal, engine, new_uuid  # noqa: E402
from careerhub.models import Profile  # noqa: E402
from careerhub.utils.jwt_handler import create_access_token  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Create a local profile and print a bearer token for it. "
            "Only for development: production tokens come from the identity provider."
        )
    )
    parser.add_argument("--user-id", default=None, help="Profile id (generated if omitted)")
    parser.add_argument("--name", default="Dev User", help="Display name")
    parser.add_argument("--minutes", type=int, default=60, help="Token lifetime in minutes")
    args = parser.parse_args(argv)

    Base.metadata.create_all(bind=engine)
    user_id = args.user_id or new_uuid()

    with SessionLocal() as db:
        if db.get(Profile, user_id) is None:
            db.add(Profile(id=user_id, full_name=args.name))
            db.commit()

    token = create_access_token({"sub": user_id}, timedelta(minutes=args.minutes))
    print("user_id:", user_id)
    print("token:", token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
