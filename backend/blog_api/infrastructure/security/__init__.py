from .jwt_auth import JWTIdentityVerifier, create_access_token

__all__ = [
    "JWTIdentityVerifier",
    "create_access_token",
]
