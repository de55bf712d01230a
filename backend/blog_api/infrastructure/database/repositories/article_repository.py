"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.application.interfaces import ArticleRepository
from blog_api.domain.entities import Article, ArticleStatus
from blog_api.infrastructure.database.base import as_utc
from blog_api.infrastructure.database.models import ArticleModel, CommentModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            body=model.body,
            user_id=model.user_id,
            status=ArticleStatus(model.status),
            published_at=as_utc(model.published_at),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            body=entity.body,
            user_id=entity.user_id,
            status=entity.status.value,
            published_at=as_utc(entity.published_at),
            created_at=as_utc(entity.created_at),
            updated_at=as_utc(entity.updated_at),
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        # populate_existing: a transition may have rewritten the row behind the identity map
        result = await self._session.get(ArticleModel, article_id, populate_existing=True)
        return self._to_entity(result) if result else None

    async def list_published(self) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.status == ArticleStatus.PUBLISHED.value)
            .order_by(ArticleModel.published_at.desc(), ArticleModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.body = article.body
        model.status = article.status.value
        model.published_at = as_utc(article.published_at)
        model.updated_at = as_utc(article.updated_at)
        await self._session.flush()
        return self._to_entity(model)

    async def save_transition(self, article: Article, expected_status: ArticleStatus) -> bool:
        # Single conditional UPDATE: of two racing identical transitions only one matches.
        stmt = (
            update(ArticleModel)
            .where(
                ArticleModel.id == article.id,
                ArticleModel.status == expected_status.value,
            )
            .values(
                status=article.status.value,
                published_at=as_utc(article.published_at),
                updated_at=as_utc(article.updated_at),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.execute(
            delete(CommentModel).where(CommentModel.article_id == article_id)
        )
        await self._session.delete(model)
        await self._session.flush()
        return True
