from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from taskboard.db import client as db_client
from taskboard.db import init_db
from taskboard.main import app
from taskboard.services.users import register_user


@pytest.fixture()
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the app at a fresh SQLite file per test."""
    path = tmp_path / "tasks.db"
    monkeypatch.setattr(db_client, "DATABASE_PATH", path)
    init_db()
    return path


@pytest.fixture()
def alice(database: Path) -> dict:
    return register_user("alice")


@pytest.fixture()
def bob(database: Path) -> dict:
    return register_user("bob")


@pytest.fixture()
def client(database: Path) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth() -> Callable[[dict], dict]:
    """Build request headers for a registered user."""

    def _auth(user: dict) -> dict:
        return {"Authorization": f"Bearer {user['token']}"}

    return _auth
