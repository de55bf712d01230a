from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleCreateRequest,
    ArticleUpdateRequest,
    ArticleResponse,
    ArticleTransitionResponse,
)
from .comment import CommentCreate, CommentCreateRequest, CommentResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleCreateRequest",
    "ArticleUpdateRequest",
    "ArticleResponse",
    "ArticleTransitionResponse",
    "CommentCreate",
    "CommentCreateRequest",
    "CommentResponse",
]
