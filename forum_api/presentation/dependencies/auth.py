"""
Authentication Dependency for FastAPI.

- Extracts the access token from the Authorization header (Bearer scheme)
- Verifies it with the access-token key
- Returns the authenticated user's id/username for route handlers
- Raises HTTPException 401 if unauthorized

The use cases never see the token: routers merge ``current_user.id`` into
the payload as ``owner``.
"""

from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from forum_api.config.settings import Config


@dataclass
class AuthUser:
    id: str
    username: str


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    """
    Extract and validate user from JWT access token.

    Raises:
        HTTPException 401 if token is missing, invalid, expired, or lacks claims
    """
    if credentials is None:
        raise _unauthorized("Missing authentication")

    try:
        claims = jwt.decode(
            credentials.credentials,
            Config.ACCESS_TOKEN_KEY,
            algorithms=[Config.TOKEN_ALGORITHM],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError as e:
        raise _unauthorized(f"Invalid token: {str(e)}")

    user_id = claims.get("id")
    username = claims.get("username")
    if not user_id or not username:
        raise _unauthorized("Missing required claims in token")

    return AuthUser(id=user_id, username=username)
