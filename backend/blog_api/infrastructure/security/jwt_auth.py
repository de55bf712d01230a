"""Bearer token issuance and verification (HS256 JWT via PyJWT).

Tokens carry ``sub`` (the user id as a string), ``scp``, ``iat`` and ``exp``.
Verification collapses every failure into ``AuthenticationError`` so callers
cannot tell an expired token from a forged one.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from blog_api.application.interfaces import IdentityVerifier, UserRepository
from blog_api.domain.exceptions import AuthenticationError
from blog_api.infrastructure.database.base import is_row_id

logger = logging.getLogger(__name__)

_BEARER_SCHEME = "bearer"


def create_access_token(
    user_id: int,
    secret_key: str,
    algorithm: str = "HS256",
    expires_minutes: int = 60 * 24,
    now: datetime | None = None,
) -> str:
    """Sign a bearer token for ``user_id``."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "scp": "user",
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def _extract_bearer(authorization: str | None) -> str:
    if not authorization:
        raise AuthenticationError("missing authorization header")
    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != _BEARER_SCHEME or not token:
        raise AuthenticationError("authorization header is not a bearer token")
    return token


class JWTIdentityVerifier(IdentityVerifier):
    """Resolves a signed bearer token to the id of an existing user."""

    def __init__(self, user_repository: UserRepository, secret_key: str, algorithm: str = "HS256"):
        self._users = user_repository
        self._secret_key = secret_key
        self._algorithm = algorithm

    async def resolve(self, authorization: str | None) -> int:
        try:
            return await self._resolve(authorization)
        except AuthenticationError as e:
            logger.debug("Bearer authentication failed: %s", e.reason)
            raise

    async def _resolve(self, authorization: str | None) -> int:
        token = _extract_bearer(authorization)
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("token expired") from None
        except jwt.InvalidTokenError as e:
            raise AuthenticationError(f"invalid token: {type(e).__name__}") from None

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise AuthenticationError("token subject is not a user id") from None
        if not is_row_id(user_id):
            raise AuthenticationError("token subject is out of range")

        user = await self._users.get_by_id(user_id)
        if user is None:
            raise AuthenticationError(f"token subject {user_id} does not exist")
        return user_id
