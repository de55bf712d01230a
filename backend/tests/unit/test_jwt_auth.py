"""Unit tests for bearer token issuance and verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from blog_api.domain.entities import User
from blog_api.domain.exceptions import AuthenticationError
from blog_api.infrastructure.security import JWTIdentityVerifier, create_access_token

SECRET = "test-secret"


@pytest.fixture
def verifier(user_repository) -> JWTIdentityVerifier:
    return JWTIdentityVerifier(user_repository, secret_key=SECRET)


@pytest.mark.asyncio
async def test_valid_token_resolves_to_user(user_repository, verifier):
    user = await user_repository.create(User(email="a@example.com", name="A"))
    token = create_access_token(user.id, SECRET)
    assert await verifier.resolve(f"Bearer {token}") == user.id


@pytest.mark.asyncio
async def test_token_claims(user_repository):
    user = await user_repository.create(User(email="a@example.com", name="A"))
    now = datetime(2025, 12, 3, tzinfo=timezone.utc)
    token = create_access_token(user.id, SECRET, expires_minutes=60, now=now)
    payload = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})
    assert payload["sub"] == str(user.id)
    assert payload["scp"] == "user"
    assert payload["exp"] == int((now + timedelta(minutes=60)).timestamp())


@pytest.mark.parametrize(
    "header",
    [None, "", "Bearer", "Bearer ", "Basic abc", "Bearer not-a-jwt", "Token abc.def.ghi"],
)
@pytest.mark.asyncio
async def test_missing_or_malformed_header_is_unauthenticated(verifier, header):
    with pytest.raises(AuthenticationError):
        await verifier.resolve(header)


@pytest.mark.asyncio
async def test_expired_token_is_unauthenticated(user_repository, verifier):
    user = await user_repository.create(User(email="a@example.com", name="A"))
    long_ago = datetime.now(timezone.utc) - timedelta(days=2)
    token = create_access_token(user.id, SECRET, expires_minutes=60, now=long_ago)
    with pytest.raises(AuthenticationError):
        await verifier.resolve(f"Bearer {token}")


@pytest.mark.asyncio
async def test_wrong_signature_is_unauthenticated(user_repository, verifier):
    user = await user_repository.create(User(email="a@example.com", name="A"))
    token = create_access_token(user.id, "some-other-secret")
    with pytest.raises(AuthenticationError):
        await verifier.resolve(f"Bearer {token}")


@pytest.mark.asyncio
async def test_unknown_subject_is_unauthenticated(verifier):
    token = create_access_token(12345, SECRET)
    with pytest.raises(AuthenticationError):
        await verifier.resolve(f"Bearer {token}")


@pytest.mark.asyncio
async def test_non_numeric_subject_is_unauthenticated(verifier):
    exp = datetime.now(timezone.utc) + timedelta(hours=1)
    token = jwt.encode({"sub": "alice", "exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(AuthenticationError):
        await verifier.resolve(f"Bearer {token}")


@pytest.mark.asyncio
async def test_token_without_expiry_is_unauthenticated(user_repository, verifier):
    user = await user_repository.create(User(email="a@example.com", name="A"))
    token = jwt.encode({"sub": str(user.id)}, SECRET, algorithm="HS256")
    with pytest.raises(AuthenticationError):
        await verifier.resolve(f"Bearer {token}")


@pytest.mark.parametrize("subject", ["0", "-1", "9" * 30, str(2**63)])
@pytest.mark.asyncio
async def test_subject_outside_id_range_is_unauthenticated(verifier, subject):
    exp = datetime.now(timezone.utc) + timedelta(hours=1)
    token = jwt.encode({"sub": subject, "exp": exp}, SECRET, algorithm="HS256")
    with pytest.raises(AuthenticationError):
        await verifier.resolve(f"Bearer {token}")
