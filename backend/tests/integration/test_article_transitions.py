"""Named transitions against the real database, including a lost race."""

from datetime import datetime, timezone

import pytest

from blog_api.application.services import ArticleService
from blog_api.domain.entities import Article, ArticleStatus
from blog_api.infrastructure.database.repositories import SQLAlchemyArticleRepository

FIRST = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)
SECOND = datetime(2025, 3, 1, 9, 5, tzinfo=timezone.utc)


class InterleavingArticleRepository(SQLAlchemyArticleRepository):
    """Runs ``between`` once, right after the first article load."""

    def __init__(self, session, between):
        super().__init__(session)
        self._between = between

    async def get_by_id(self, article_id: int) -> Article | None:
        article = await super().get_by_id(article_id)
        if self._between is not None:
            between, self._between = self._between, None
            await between()
        return article


async def _create_draft(session_factory, owner_id: int) -> Article:
    async with session_factory() as session:
        article = await SQLAlchemyArticleRepository(session).create(
            Article(title="Race", body="Body", user_id=owner_id)
        )
        await session.commit()
    return article


@pytest.mark.asyncio
async def test_publish_persists_through_repository(session_factory, owner):
    draft = await _create_draft(session_factory, owner.id)

    async with session_factory() as session:
        service = ArticleService(SQLAlchemyArticleRepository(session), clock=lambda: FIRST)
        article, changed = await service.publish_article(draft.id, acting_user_id=owner.id)
        await session.commit()
    assert changed is True
    assert article.published_at == FIRST

    async with session_factory() as session:
        stored = await SQLAlchemyArticleRepository(session).get_by_id(draft.id)
    assert stored.status is ArticleStatus.PUBLISHED
    assert stored.published_at == FIRST


@pytest.mark.asyncio
async def test_first_of_two_concurrent_publishes_wins(session_factory, owner):
    draft = await _create_draft(session_factory, owner.id)

    async def publish_elsewhere():
        async with session_factory() as other:
            service = ArticleService(SQLAlchemyArticleRepository(other), clock=lambda: FIRST)
            _, changed = await service.publish_article(draft.id, acting_user_id=owner.id)
            assert changed is True
            await other.commit()

    async with session_factory() as session:
        # This request reads the draft, then the other one publishes and commits.
        repository = InterleavingArticleRepository(session, publish_elsewhere)
        service = ArticleService(repository, clock=lambda: SECOND)
        article, changed = await service.publish_article(draft.id, acting_user_id=owner.id)
        await session.commit()

    assert changed is False
    assert article.status is ArticleStatus.PUBLISHED
    assert article.published_at == FIRST

    async with session_factory() as session:
        stored = await SQLAlchemyArticleRepository(session).get_by_id(draft.id)
    assert stored.status is ArticleStatus.PUBLISHED
    assert stored.published_at == FIRST


@pytest.mark.asyncio
async def test_archive_after_concurrent_archive_reports_noop(session_factory, owner):
    draft = await _create_draft(session_factory, owner.id)

    async def archive_elsewhere():
        async with session_factory() as other:
            service = ArticleService(SQLAlchemyArticleRepository(other), clock=lambda: FIRST)
            await service.archive_article(draft.id, acting_user_id=owner.id)
            await other.commit()

    async with session_factory() as session:
        repository = InterleavingArticleRepository(session, archive_elsewhere)
        service = ArticleService(repository, clock=lambda: SECOND)
        article, changed = await service.archive_article(draft.id, acting_user_id=owner.id)
        await session.commit()

    assert changed is False
    assert article.status is ArticleStatus.ARCHIVED
