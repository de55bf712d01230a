"""In-memory fakes of the repository ports, shared by the unit tests."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from blog_api.application.interfaces import ArticleRepository, CommentRepository, UserRepository
from blog_api.application.services import ArticleService, CommentService
from blog_api.domain.entities import Article, ArticleStatus, Comment, User


class FakeCommentRepository(CommentRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._comments: dict[int, Comment] = {}
        self._next_id = 1

    def count_for_article(self, article_id: int) -> int:
        return sum(1 for c in self._comments.values() if c.article_id == article_id)

    def delete_for_article(self, article_id: int) -> None:
        for comment_id in [c.id for c in self._comments.values() if c.article_id == article_id]:
            del self._comments[comment_id]

    async def list_for_article(self, article_id: int) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.article_id == article_id]
        return sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)

    async def get_for_article(self, article_id: int, comment_id: int) -> Comment | None:
        comment = self._comments.get(comment_id)
        if comment is None or comment.article_id != article_id:
            return None
        return comment

    async def create(self, comment: Comment) -> Comment:
        comment.id = self._next_id
        self._next_id += 1
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: int) -> bool:
        return self._comments.pop(comment_id, None) is not None


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository. Hands out copies so unsaved changes stay unsaved."""

    def __init__(self, comments: FakeCommentRepository | None = None):
        self._articles: dict[int, Article] = {}
        self._next_id = 1
        self._comments = comments
        self.lose_next_transition = False

    def stored(self, article_id: int) -> Article:
        return self._articles[article_id]

    async def get_by_id(self, article_id: int) -> Article | None:
        article = self._articles.get(article_id)
        return replace(article) if article else None

    async def list_published(self) -> list[Article]:
        published = [a for a in self._articles.values() if a.status is ArticleStatus.PUBLISHED]
        ordered = sorted(published, key=lambda a: (a.published_at, a.id), reverse=True)
        return [replace(a) for a in ordered]

    async def create(self, article: Article) -> Article:
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = replace(article)
        return article

    async def update(self, article: Article) -> Article:
        if article.id not in self._articles:
            raise ValueError(f"Article {article.id} not found")
        self._articles[article.id] = replace(article)
        return article

    async def save_transition(self, article: Article, expected_status: ArticleStatus) -> bool:
        if self.lose_next_transition:
            # Simulate a concurrent writer that applied the same transition first.
            self.lose_next_transition = False
            self._articles[article.id] = replace(article)
            return False
        if self._articles[article.id].status is not expected_status:
            return False
        self._articles[article.id] = replace(article)
        return True

    async def delete(self, article_id: int) -> bool:
        if article_id not in self._articles:
            return False
        if self._comments is not None:
            self._comments.delete_for_article(article_id)
        del self._articles[article_id]
        return True


class FakeUserRepository(UserRepository):

    def __init__(self):
        self._users: dict[int, User] = {}
        self._next_id = 1

    async def get_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def create(self, user: User) -> User:
        user.id = self._next_id
        self._next_id += 1
        self._users[user.id] = user
        return user


class FixedClock:
    """Deterministic clock; ``advance`` moves it forward."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 12, 3, 10, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


OWNER_ID = 1
OTHER_USER_ID = 2


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def comment_repository() -> FakeCommentRepository:
    return FakeCommentRepository()


@pytest.fixture
def article_repository(comment_repository: FakeCommentRepository) -> FakeArticleRepository:
    return FakeArticleRepository(comments=comment_repository)


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def service(article_repository: FakeArticleRepository, clock: FixedClock) -> ArticleService:
    return ArticleService(article_repository, clock=clock)


@pytest.fixture
def comment_service(
    comment_repository: FakeCommentRepository,
    article_repository: FakeArticleRepository,
) -> CommentService:
    return CommentService(comment_repository, article_repository)
