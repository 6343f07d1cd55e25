"""
Security Ports - Password hashing and token issuance.
Implementations: forum_api/infrastructure/security/
"""

from abc import ABC, abstractmethod
from typing import Any


class PasswordHash(ABC):
    @abstractmethod
    async def hash(self, password: str) -> str: ...

    @abstractmethod
    async def compare(self, password: str, hashed_password: str) -> None:
        """Raises AuthenticationError if the password does not match."""
        ...


class AuthenticationTokenManager(ABC):
    @abstractmethod
    async def create_access_token(self, payload: dict[str, Any]) -> str: ...

    @abstractmethod
    async def create_refresh_token(self, payload: dict[str, Any]) -> str: ...

    @abstractmethod
    async def verify_refresh_token(self, token: str) -> None:
        """Raises DomainValidationError if the refresh token is invalid."""
        ...

    @abstractmethod
    async def decode_payload(self, token: str) -> dict[str, Any]: ...
