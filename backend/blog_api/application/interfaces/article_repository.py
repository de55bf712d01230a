"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog_api.domain.entities import Article, ArticleStatus


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID, whatever its status."""
        ...

    @abstractmethod
    async def list_published(self) -> list[Article]:
        """Retrieve published articles, newest ``published_at`` first (ties: higher ID first)."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Write all mutable fields of an existing article."""
        ...

    @abstractmethod
    async def save_transition(self, article: Article, expected_status: ArticleStatus) -> bool:
        """Persist a status transition only if the stored status still equals ``expected_status``.

        Returns False when another writer changed the status first.
        """
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article and all of its comments atomically.

        Returns True if deleted, False if not found.
        """
        ...
