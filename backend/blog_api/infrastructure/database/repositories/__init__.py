from .article_repository import SQLAlchemyArticleRepository
from .comment_repository import SQLAlchemyCommentRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyCommentRepository",
    "SQLAlchemyUserRepository",
]
