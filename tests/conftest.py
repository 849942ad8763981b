"""Shared fixtures: an in-memory stand-in for the posts table."""

from typing import Any

import httpx
import pytest

from core.db import StorageError
from main import create_app


class InMemoryDatabase:
    """Implements the Database query interface for the two post statements."""

    def __init__(self):
        self.rows: list[dict[str, Any]] = []
        self.statements: list[tuple[str, tuple]] = []

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self.statements.append((sql, args))
        if "INSERT INTO posts" not in sql:
            raise AssertionError(f"unexpected statement: {sql}")
        post_id, title, content = args
        if any(row["id"] == post_id for row in self.rows):
            raise StorageError('duplicate key value violates unique constraint "posts_pkey"')
        row = {"id": post_id, "title": title, "content": content}
        self.rows.append(row)
        return dict(row)

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self.statements.append((sql, args))
        if "FROM posts" not in sql:
            raise AssertionError(f"unexpected statement: {sql}")
        return [dict(row) for row in self.rows]

    async def execute(self, sql: str, *args: Any) -> None:
        self.statements.append((sql, args))


class BrokenDatabase:
    """Every statement fails the way a lost connection does."""

    async def fetch_one(self, sql: str, *args: Any):
        raise StorageError("connection was closed in the middle of operation")

    async def fetch_all(self, sql: str, *args: Any):
        raise StorageError("connection was closed in the middle of operation")

    async def execute(self, sql: str, *args: Any):
        raise StorageError("connection was closed in the middle of operation")


class SequentialIdGenerator:
    def __init__(self, prefix: str = "post"):
        self.prefix = prefix
        self.count = 0

    def generate_id(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def app(database):
    return create_app(database=database)


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c


@pytest.fixture
async def broken_client():
    app = create_app(database=BrokenDatabase())
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
