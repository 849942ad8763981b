"""
FastAPI router for post endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import dependencies, schemas, service
from .repository import PostStore

router = APIRouter()


@router.get("/posts")
async def list_posts(
    store: PostStore = Depends(dependencies.get_post_store),
) -> list[schemas.PostResponse]:
    return await service.list_posts(store)


@router.post("/posts")
async def create_post(
    request: schemas.CreatePostRequest,
    store: PostStore = Depends(dependencies.get_post_store),
) -> schemas.PostResponse:
    """
    Create a post. The id is generated server-side.
    """
    return await service.create_post(store, request)
