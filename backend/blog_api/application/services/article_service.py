"""Application service (use case) for Article operations."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from blog_api.application.interfaces import ArticleRepository
from blog_api.application.schemas import ArticleCreate, ArticleUpdate
from blog_api.domain.entities import Article, ArticleStatus, coerce_status, normalize_publication
from blog_api.domain.exceptions import EntityNotFoundError, PermissionDeniedError, ValidationError
from blog_api.domain.policies import can_mutate
from blog_api.domain.validation import (
    DEFAULT_MESSAGES,
    ArticleFields,
    ValidationMessages,
    validate_article,
)

logger = logging.getLogger(__name__)

Transition = Callable[[Article, datetime], bool]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ArticleService:
    """Orchestrates article lifecycle logic. Depends on the repository port (DI).

    Every write path runs the same two steps before persistence:
    ``normalize_publication`` then ``validate_article``.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        messages: ValidationMessages = DEFAULT_MESSAGES,
        strict_status_transitions: bool = False,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._repository = repository
        self._messages = messages
        self._strict_status_transitions = strict_status_transitions
        self._clock = clock

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_published_articles(self) -> list[Article]:
        return await self._repository.list_published()

    async def create_article(self, data: ArticleCreate, owner_id: int) -> Article:
        """Create an article owned by ``owner_id``. Omitted status means draft."""
        now = self._clock()
        status = data.status if "status" in data.model_fields_set else ArticleStatus.DRAFT
        fields = ArticleFields(
            title=data.title,
            body=data.body,
            status=coerce_status(status),
            published_at=data.published_at,
        )
        fields.published_at = normalize_publication(
            fields.status, fields.published_at, previous_status=None, now=now
        )

        errors = validate_article(fields, self._messages)
        if errors:
            raise ValidationError(errors)

        article = Article(
            title=fields.title,
            body=fields.body,
            user_id=owner_id,
            status=fields.status,
            published_at=fields.published_at,
            created_at=now,
            updated_at=now,
        )
        created = await self._repository.create(article)
        logger.info("Article %s created by user %s (%s)", created.id, owner_id, created.status.value)
        return created

    async def update_article(
        self, article_id: int, data: ArticleUpdate, acting_user_id: int
    ) -> Article:
        """Apply the fields present in ``data``, then re-validate the merged result."""
        article = await self._get_owned_article(article_id, acting_user_id)
        changes = data.model_dump(exclude_unset=True)
        now = self._clock()
        previous_status = article.status

        fields = ArticleFields(
            title=changes.get("title", article.title),
            body=changes.get("body", article.body),
            status=coerce_status(changes.get("status", article.status)),
            published_at=changes.get("published_at", article.published_at),
        )
        fields.published_at = normalize_publication(
            fields.status, fields.published_at, previous_status=previous_status, now=now
        )

        errors = validate_article(fields, self._messages)
        if (
            self._strict_status_transitions
            and previous_status is ArticleStatus.ARCHIVED
            and fields.status is not ArticleStatus.ARCHIVED
        ):
            errors.append(self._messages.status_locked)
        if errors:
            raise ValidationError(errors)

        article.title = fields.title
        article.body = fields.body
        article.status = fields.status
        article.published_at = fields.published_at
        article.updated_at = now
        return await self._repository.update(article)

    async def publish_article(self, article_id: int, acting_user_id: int) -> tuple[Article, bool]:
        """Publish now. Returns ``(article, False)`` if it was already published."""
        return await self._transition(article_id, acting_user_id, Article.publish)

    async def unpublish_article(self, article_id: int, acting_user_id: int) -> tuple[Article, bool]:
        """Return a published article to draft. No-op unless currently published."""
        return await self._transition(article_id, acting_user_id, Article.unpublish)

    async def archive_article(self, article_id: int, acting_user_id: int) -> tuple[Article, bool]:
        """Archive. No-op if already archived."""
        return await self._transition(article_id, acting_user_id, Article.archive)

    async def delete_article(self, article_id: int, acting_user_id: int) -> bool:
        """Delete the article together with all of its comments."""
        await self._get_owned_article(article_id, acting_user_id)
        deleted = await self._repository.delete(article_id)
        logger.info("Article %s deleted by user %s", article_id, acting_user_id)
        return deleted

    async def _get_owned_article(self, article_id: int, acting_user_id: int) -> Article:
        article = await self.get_article(article_id)
        if not can_mutate(article, acting_user_id):
            logger.warning(
                "User %s denied mutation of article %s owned by user %s",
                acting_user_id,
                article_id,
                article.user_id,
            )
            raise PermissionDeniedError("Article", article_id, acting_user_id)
        return article

    async def _transition(
        self, article_id: int, acting_user_id: int, transition: Transition
    ) -> tuple[Article, bool]:
        article = await self._get_owned_article(article_id, acting_user_id)
        previous_status = article.status
        if not transition(article, self._clock()):
            return article, False

        if not await self._repository.save_transition(article, expected_status=previous_status):
            # Another request moved the article first; report its current state.
            logger.info("Article %s %s lost a concurrent transition", article_id, transition.__name__)
            return await self.get_article(article_id), False

        logger.info(
            "Article %s %s: %s -> %s",
            article_id,
            transition.__name__,
            previous_status.value,
            article.status.value,
        )
        return article, True
