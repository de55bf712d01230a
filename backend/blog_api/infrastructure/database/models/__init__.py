from .user import UserModel
from .article import ArticleModel
from .comment import CommentModel

__all__ = [
    "UserModel",
    "ArticleModel",
    "CommentModel",
]
