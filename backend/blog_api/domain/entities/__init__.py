from .article import Article, ArticleStatus, coerce_status, normalize_publication
from .comment import Comment
from .user import User

__all__ = [
    "Article",
    "ArticleStatus",
    "coerce_status",
    "normalize_publication",
    "Comment",
    "User",
]
