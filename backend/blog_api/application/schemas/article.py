"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

Field rules are not enforced here: the domain validation pipeline reports
every violated rule at once, with the configured messages.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from blog_api.domain.entities import ArticleStatus


class ArticleCreate(BaseModel):
    """Schema for creating a new article. ``status`` defaults to draft when omitted."""

    title: str | None = Field(None, examples=["Getting Started"])
    body: str | None = Field(None, examples=["This is the first post."])
    status: str | None = Field(None, examples=["draft"])
    published_at: datetime | None = None


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — only fields sent are applied.

    An explicit ``null`` is distinct from an omitted field.
    """

    title: str | None = None
    body: str | None = None
    status: str | None = None
    published_at: datetime | None = None


class ArticleCreateRequest(BaseModel):
    article: ArticleCreate


class ArticleUpdateRequest(BaseModel):
    article: ArticleUpdate


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    body: str
    status: ArticleStatus
    published_at: datetime | None
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleTransitionResponse(BaseModel):
    """Result of publish / unpublish / archive. ``changed`` is False for a no-op."""

    article: ArticleResponse
    changed: bool
