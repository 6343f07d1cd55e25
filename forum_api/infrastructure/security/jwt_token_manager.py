"""
PyJWT implementation of the AuthenticationTokenManager port.

Access tokens expire after ``access_token_age`` seconds. Refresh tokens do
not expire on their own; they stay valid until removed from the
authentications table (logout). A random ``jti`` keeps every refresh token
unique.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import jwt

from forum_api.domain.exceptions import DomainValidationError
from forum_api.domain.ports.security import AuthenticationTokenManager

logger = logging.getLogger(__name__)


class JwtTokenManager(AuthenticationTokenManager):
    def __init__(
        self,
        access_token_key: str,
        refresh_token_key: str,
        access_token_age: int,
        algorithm: str = "HS256",
    ):
        self._access_token_key = access_token_key
        self._refresh_token_key = refresh_token_key
        self._access_token_age = access_token_age
        self._algorithm = algorithm

    async def create_access_token(self, payload: dict[str, Any]) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            **payload,
            "iat": now,
            "exp": now + timedelta(seconds=self._access_token_age),
        }
        return jwt.encode(claims, self._access_token_key, algorithm=self._algorithm)

    async def create_refresh_token(self, payload: dict[str, Any]) -> str:
        claims = {
            **payload,
            "iat": datetime.now(timezone.utc),
            "jti": uuid4().hex,
        }
        return jwt.encode(claims, self._refresh_token_key, algorithm=self._algorithm)

    async def verify_refresh_token(self, token: str) -> None:
        try:
            jwt.decode(token, self._refresh_token_key, algorithms=[self._algorithm])
        except jwt.InvalidTokenError as e:
            logger.warning(f"[Token] Rejected refresh token: {e}")
            raise DomainValidationError("REFRESH_TOKEN.INVALID") from e

    async def decode_payload(self, token: str) -> dict[str, Any]:
        return jwt.decode(token, options={"verify_signature": False})
