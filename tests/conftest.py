import os
import sys
from datetime import datetime, timezone
from typing import Optional

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from fastapi.testclient import TestClient

from forum_api.config.settings import Config
from forum_api.fastapi_app import create_fastapi_app
from forum_api.infrastructure.persistence.memory import InMemoryDatabase
from forum_api.setup.ioc.container import create_container


class TableHelper:
    """Seeds rows straight into the in-memory tables (bypassing use cases)."""

    def __init__(self, database: InMemoryDatabase):
        self._db = database

    def add_user(
        self,
        id: str = "user-123",
        username: str = "dicoding",
        password: str = "secret",
        fullname: str = "Dicoding Indonesia",
    ) -> None:
        self._db.users.append(
            {"id": id, "username": username, "password": password, "fullname": fullname}
        )

    def add_thread(
        self,
        id: str = "thread-123",
        title: str = "sebuah thread",
        body: str = "sebuah body thread",
        owner: str = "user-123",
        date: Optional[datetime] = None,
    ) -> None:
        self._db.threads.append(
            {
                "id": id,
                "title": title,
                "body": body,
                "owner": owner,
                "date": date or datetime(2021, 8, 8, 7, 0, tzinfo=timezone.utc),
            }
        )

    def add_comment(
        self,
        id: str = "comment-123",
        content: str = "sebuah comment",
        thread_id: str = "thread-123",
        owner: str = "user-123",
        date: Optional[datetime] = None,
        is_delete: bool = False,
    ) -> None:
        self._db.comments.append(
            {
                "id": id,
                "thread_id": thread_id,
                "owner": owner,
                "content": content,
                "date": date or datetime.now(timezone.utc),
                "is_delete": is_delete,
            }
        )

    def add_reply(
        self,
        id: str = "reply-123",
        content: str = "sebuah balasan",
        comment_id: str = "comment-123",
        owner: str = "user-123",
        date: Optional[datetime] = None,
        is_delete: bool = False,
    ) -> None:
        self._db.replies.append(
            {
                "id": id,
                "comment_id": comment_id,
                "owner": owner,
                "content": content,
                "date": date or datetime.now(timezone.utc),
                "is_delete": is_delete,
            }
        )

    def find_comment(self, id: str) -> Optional[dict]:
        return InMemoryDatabase.find(self._db.comments, id=id)

    def find_reply(self, id: str) -> Optional[dict]:
        return InMemoryDatabase.find(self._db.replies, id=id)


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Minimum bcrypt cost so registration/login stay fast."""
    monkeypatch.setattr(Config, "BCRYPT_ROUNDS", 4)


@pytest.fixture()
def database():
    return InMemoryDatabase()


@pytest.fixture()
def tables(database):
    return TableHelper(database)


@pytest.fixture()
def app(database):
    """Create a FastAPI app wired to in-memory repositories for each test."""
    return create_fastapi_app(create_container(backend="memory", database=database))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def login(client):
    """Register (if needed) and log in a user; returns the login response data."""

    def _login(username: str = "dicoding", password: str = "secret") -> dict:
        client.post(
            "/users",
            json={"username": username, "password": password, "fullname": "Dicoding Indonesia"},
        )
        response = client.post(
            "/authentications", json={"username": username, "password": password}
        )
        assert response.status_code == 201
        return response.json()["data"]

    return _login


@pytest.fixture()
def auth_headers(login):
    """Authentication headers with a valid access token for 'dicoding'."""
    return {"Authorization": f"Bearer {login()['accessToken']}"}
