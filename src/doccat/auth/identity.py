"""Identity services that turn a bearer token into the caller's user id.

``JWTIdentityService`` verifies HS256 access tokens with PyJWT;
``StaticIdentityService`` maps fixed tokens to users for local development
and tests.
"""

from __future__ import annotations

from typing import Any, Optional

import jwt
from pydantic import BaseModel, ValidationError

from doccat.core.config import AuthConfig
from doccat.core.exceptions import AuthenticationError
from doccat.core.logging import get_logger

LOGGER = get_logger(__name__)

INVALID_TOKEN = "Invalid authentication token"


class TokenClaims(BaseModel):
    """Decoded access token claims."""

    sub: str  # User ID
    exp: int | float
    iat: Optional[int | float] = None
    iss: Optional[str] = None
    aud: Optional[str | list[str]] = None
    email: Optional[str] = None
    role: str = "authenticated"


class JWTIdentityService:
    """IIdentityService verifying HS256 tokens signed with a shared secret."""

    def __init__(self, secret: str, audience: str = "authenticated", issuer: str = "") -> None:
        if not secret:
            raise ValueError("JWT identity service requires a non-empty secret")
        self._secret = secret
        self._audience = audience
        self._issuer = issuer

    def decode(self, token: str) -> TokenClaims:
        """Verify signature, expiry, audience and (if configured) issuer.

        Raises:
            AuthenticationError: the token is malformed, expired or forged.
        """
        options: dict[str, Any] = {"require": ["sub", "exp"]}
        kwargs: dict[str, Any] = {"audience": self._audience or None, "options": options}
        if not self._audience:
            options["verify_aud"] = False
        if self._issuer:
            kwargs["issuer"] = self._issuer

        try:
            payload = jwt.decode(token, self._secret, algorithms=["HS256"], **kwargs)
        except jwt.ExpiredSignatureError as exc:
            LOGGER.warning("Token expired: %s", exc)
            raise AuthenticationError(INVALID_TOKEN, details="Token has expired") from exc
        except jwt.InvalidTokenError as exc:
            LOGGER.warning("Invalid token: %s", exc)
            raise AuthenticationError(INVALID_TOKEN) from exc

        try:
            return TokenClaims(**payload)
        except ValidationError as exc:
            LOGGER.warning("Token claims rejected: %s", exc)
            raise AuthenticationError(INVALID_TOKEN) from exc

    def verify(self, token: str) -> str:
        return self.decode(token).sub


class StaticIdentityService:
    """IIdentityService backed by a fixed token -> user id table."""

    def __init__(self, tokens: dict[str, str] | None = None) -> None:
        self._tokens = dict(tokens or {})

    def verify(self, token: str) -> str:
        user_id = self._tokens.get(token)
        if user_id is None:
            LOGGER.warning("Rejected unknown static token")
            raise AuthenticationError(INVALID_TOKEN)
        return user_id


def create_identity_service(config: AuthConfig):
    if config.provider == "jwt":
        return JWTIdentityService(config.jwt_secret, audience=config.audience, issuer=config.issuer)
    return StaticIdentityService(config.static_tokens)
