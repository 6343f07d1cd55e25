"""Security adapters for the PasswordHash and AuthenticationTokenManager ports."""

from forum_api.infrastructure.security.bcrypt_password_hash import BcryptPasswordHash
from forum_api.infrastructure.security.jwt_token_manager import JwtTokenManager

__all__ = [
    "BcryptPasswordHash",
    "JwtTokenManager",
]
