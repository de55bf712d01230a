from .article_service import ArticleService
from .comment_service import CommentService

__all__ = [
    "ArticleService",
    "CommentService",
]
