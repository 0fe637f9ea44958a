from __future__ import annotations

import os
from datetime import timedelta
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["DB_URL"] = "sqlite:///./test.db"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["JWT_SECRET"] = "test-secret"
    os.environ["MARK_VIEWED_RETRIES"] = "1"


@pytest.fixture(autouse=True)
def _reset_database() -> None:
    from careerhub.database import Base, engine
    import careerhub.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def gateway() -> Any:
    from careerhub.database import SessionLocal
    from careerhub.db.gateway import TableGateway

    return TableGateway(SessionLocal)


@pytest.fixture()
def client() -> Any:
    from careerhub.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def user_id() -> str:
    from careerhub.database import new_uuid

    return new_uuid()


@pytest.fixture()
def auth_headers() -> Callable[[str], dict[str, str]]:
    from careerhub.utils.jwt_handler import create_access_token

    def _headers(subject: str) -> dict[str, str]:
        token = create_access_token({"sub": subject}, timedelta(minutes=5))
        return {"Authorization": f"Bearer {token}"}

    return _headers
