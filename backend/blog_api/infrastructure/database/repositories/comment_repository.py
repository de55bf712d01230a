"""SQLAlchemy implementation of the CommentRepository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.application.interfaces import CommentRepository
from blog_api.domain.entities import Comment
from blog_api.infrastructure.database.base import as_utc
from blog_api.infrastructure.database.models import CommentModel


class SQLAlchemyCommentRepository(CommentRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            article_id=model.article_id,
            author_name=model.author_name,
            body=model.body,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def list_for_article(self, article_id: int) -> list[Comment]:
        result = await self._session.execute(
            select(CommentModel)
            .where(CommentModel.article_id == article_id)
            .order_by(CommentModel.created_at.desc(), CommentModel.id.desc())
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_for_article(self, article_id: int, comment_id: int) -> Comment | None:
        result = await self._session.execute(
            select(CommentModel).where(
                CommentModel.id == comment_id,
                CommentModel.article_id == article_id,
            )
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            article_id=comment.article_id,
            author_name=comment.author_name,
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, comment_id: int) -> bool:
        model = await self._session.get(CommentModel, comment_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
