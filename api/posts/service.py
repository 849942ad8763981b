"""
Post business logic.

Storage failures are logged here and surfaced as 500 responses.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import StorageError

from . import schemas
from .repository import PostStore

logger = logging.getLogger(__name__)


def _to_post_response(row: dict) -> schemas.PostResponse:
    return schemas.PostResponse(
        id=str(row["id"]),
        title=str(row["title"]),
        content=str(row["content"]),
    )


async def create_post(store: PostStore, payload: schemas.CreatePostRequest) -> schemas.PostResponse:
    try:
        row = await store.insert(title=payload.title, content=payload.content)
    except StorageError as exc:
        logger.exception("post_insert_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to insert post into database.",
        ) from exc

    logger.info("post_created id=%s", row["id"])
    return _to_post_response(row)


async def list_posts(store: PostStore) -> list[schemas.PostResponse]:
    try:
        rows = await store.list_all()
    except StorageError as exc:
        logger.exception("post_list_failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch posts from database.",
        ) from exc

    return [_to_post_response(row) for row in rows]
