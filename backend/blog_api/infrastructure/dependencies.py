"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Header, Path
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.config import get_settings
from blog_api.application.interfaces import IdentityVerifier
from blog_api.application.services import ArticleService, CommentService
from blog_api.infrastructure.database.base import MAX_ROW_ID
from blog_api.infrastructure.database.session import get_db_session
from blog_api.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCommentRepository,
    SQLAlchemyUserRepository,
)
from blog_api.infrastructure.security import JWTIdentityVerifier

# Ids outside the storable range can never match a row; they fail path
# validation, which is rendered as 404.
RecordId = Annotated[int, Path(ge=1, le=MAX_ROW_ID)]


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    settings = get_settings()
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(
        repository,
        strict_status_transitions=settings.strict_status_transitions,
    )


async def get_comment_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[CommentService, None]:
    """Provides a CommentService backed by the comment and article repositories."""
    yield CommentService(
        comment_repository=SQLAlchemyCommentRepository(session),
        article_repository=SQLAlchemyArticleRepository(session),
    )


async def get_identity_verifier(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[IdentityVerifier, None]:
    """Provides the JWT verifier, resolving subjects against the users table."""
    settings = get_settings()
    yield JWTIdentityVerifier(
        user_repository=SQLAlchemyUserRepository(session),
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


async def get_current_user_id(
    authorization: str | None = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> int:
    """Resolve the caller from the ``Authorization: Bearer <token>`` header.

    Raises ``AuthenticationError`` (rendered as 401) on any failure.
    """
    return await verifier.resolve(authorization)


async def get_comment_delete_actor(
    authorization: str | None = Header(default=None),
    verifier: IdentityVerifier = Depends(get_identity_verifier),
) -> int | None:
    """Comment deletion is open unless ``require_auth_for_comment_delete`` is set."""
    if not get_settings().require_auth_for_comment_delete:
        return None
    return await verifier.resolve(authorization)
