"""Pydantic DTOs for comments."""

from datetime import datetime

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    author_name: str | None = Field(None, examples=["Hanako"])
    body: str | None = Field(None, examples=["Great article!"])


class CommentCreateRequest(BaseModel):
    comment: CommentCreate


class CommentResponse(BaseModel):
    id: int
    article_id: int
    author_name: str
    body: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
