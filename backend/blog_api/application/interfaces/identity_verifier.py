"""Port for resolving a bearer credential to a user id."""

from abc import ABC, abstractmethod


class IdentityVerifier(ABC):
    """Turns the raw ``Authorization`` header value into the caller's user id."""

    @abstractmethod
    async def resolve(self, authorization: str | None) -> int:
        """Return the user id, or raise ``AuthenticationError``.

        Every failure cause (missing, malformed, bad signature, expired,
        unknown subject) raises the same exception type.
        """
        ...
