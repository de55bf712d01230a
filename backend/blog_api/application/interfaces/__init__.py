from .article_repository import ArticleRepository
from .comment_repository import CommentRepository
from .user_repository import UserRepository
from .identity_verifier import IdentityVerifier

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "UserRepository",
    "IdentityVerifier",
]
