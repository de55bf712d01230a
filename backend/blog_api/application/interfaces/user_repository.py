"""Port for user lookup — the identity verifier only needs to resolve subjects."""

from abc import ABC, abstractmethod

from blog_api.domain.entities import User


class UserRepository(ABC):

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with the generated ID."""
        ...
