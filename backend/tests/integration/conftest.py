"""Fixtures driving the ASGI app against an in-memory SQLite database."""

from collections.abc import AsyncIterator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blog_api.config import get_settings
from blog_api.domain.entities import User
from blog_api.infrastructure.database import Base, get_db_session
from blog_api.infrastructure.database.repositories import SQLAlchemyUserRepository
from blog_api.infrastructure.security import create_access_token
from blog_api.main import app


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncIterator[AsyncClient]:
    async def _test_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _test_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


async def _create_user(session_factory, email: str) -> User:
    async with session_factory() as session:
        user = await SQLAlchemyUserRepository(session).create(User(email=email, name=email.split("@")[0]))
        await session.commit()
    return user


@pytest_asyncio.fixture
async def owner(session_factory) -> User:
    return await _create_user(session_factory, "owner@example.com")


@pytest_asyncio.fixture
async def other_user(session_factory) -> User:
    return await _create_user(session_factory, "other@example.com")


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    settings = get_settings()

    def _headers(user: User) -> dict[str, str]:
        token = create_access_token(
            user.id,
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            expires_minutes=settings.jwt_expiration_minutes,
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers
