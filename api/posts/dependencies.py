"""
Dependencies that hand the shared database handle to post routes.
"""

from __future__ import annotations

from fastapi import Depends, Request

from core.db import Database
from core.ids import IdGenerator

from .repository import PostStore


def get_database(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not initialized. Start the app through its lifespan.")
    return db


def get_id_generator(request: Request) -> IdGenerator:
    return request.app.state.id_generator


def get_post_store(
    db: Database = Depends(get_database),
    id_generator: IdGenerator = Depends(get_id_generator),
) -> PostStore:
    return PostStore(db, id_generator)
