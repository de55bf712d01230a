"""Port for comment persistence."""

from abc import ABC, abstractmethod

from blog_api.domain.entities import Comment


class CommentRepository(ABC):
    """Comments are always addressed through their owning article."""

    @abstractmethod
    async def list_for_article(self, article_id: int) -> list[Comment]:
        """Comments of one article, newest ``created_at`` first (ties: higher ID first)."""
        ...

    @abstractmethod
    async def get_for_article(self, article_id: int, comment_id: int) -> Comment | None:
        """Return the comment only if it belongs to ``article_id``."""
        ...

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        ...

    @abstractmethod
    async def delete(self, comment_id: int) -> bool:
        ...
