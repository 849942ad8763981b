"""
Async database access (raw SQL) using asyncpg.

`Database` owns the connection pool. The app factory creates one on startup,
stores it on `app.state.db` and closes it on shutdown (see `api/main.py`).
Request handlers receive it through FastAPI dependencies, never through a
module global.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

from typing import Any

import asyncpg

from . import settings


# Storage failures are explicit and separable from other runtime errors.
class StorageError(RuntimeError):
    pass


_STORAGE_FAILURES = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, TimeoutError)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(
        cls,
        dsn: str | None = None,
        *,
        min_size: int | None = None,
        max_size: int | None = None,
        command_timeout: float | None = None,
    ) -> Database:
        try:
            pool = await asyncpg.create_pool(
                dsn=dsn or settings.database_url(),
                min_size=min_size if min_size is not None else settings.db_pool_min_size(),
                max_size=max_size if max_size is not None else settings.db_pool_max_size(),
                command_timeout=(
                    command_timeout if command_timeout is not None else settings.db_command_timeout_s()
                ),
            )
        except _STORAGE_FAILURES as exc:
            raise StorageError(f"Failed to connect to database: {exc}") from exc
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        try:
            row = await self._pool.fetchrow(sql, *args)
        except _STORAGE_FAILURES as exc:
            raise StorageError(str(exc) or type(exc).__name__) from exc
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        try:
            rows = await self._pool.fetch(sql, *args)
        except _STORAGE_FAILURES as exc:
            raise StorageError(str(exc) or type(exc).__name__) from exc
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> None:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
        """
        try:
            await self._pool.execute(sql, *args)
        except _STORAGE_FAILURES as exc:
            raise StorageError(str(exc) or type(exc).__name__) from exc
