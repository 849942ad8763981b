"""
Post persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core.db import Database, StorageError
from core.ids import IdGenerator


class PostStore:
    def __init__(self, db: Database, id_generator: IdGenerator) -> None:
        self._db = db
        self._id_generator = id_generator

    async def insert(self, *, title: str, content: str) -> dict[str, Any]:
        row = await self._db.fetch_one(
            """
            INSERT INTO posts (id, title, content)
            VALUES ($1, $2, $3)
            RETURNING id, title, content
            """,
            self._id_generator.generate_id(),
            title,
            content,
        )
        if row is None:
            raise StorageError("Failed to insert post.")
        return row

    async def list_all(self) -> list[dict[str, Any]]:
        """
        Return every stored post in storage order (there is no sort key).
        """
        return await self._db.fetch_all(
            """
            SELECT id, title, content
            FROM posts
            """
        )
