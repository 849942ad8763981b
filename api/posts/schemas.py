"""
Post API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreatePostRequest(BaseModel):
    # Strict: numbers, booleans and null are not coerced into strings.
    model_config = ConfigDict(strict=True)

    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class PostResponse(BaseModel):
    id: str
    title: str
    content: str
