"""SQLAlchemy implementation of the UserRepository."""

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.application.interfaces import UserRepository
from blog_api.domain.entities import User
from blog_api.infrastructure.database.base import as_utc
from blog_api.infrastructure.database.models import UserModel


class SQLAlchemyUserRepository(UserRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            name=model.name,
            created_at=as_utc(model.created_at),
        )

    async def get_by_id(self, user_id: int) -> User | None:
        model = await self._session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    async def create(self, user: User) -> User:
        model = UserModel(email=user.email, name=user.name, created_at=user.created_at)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
