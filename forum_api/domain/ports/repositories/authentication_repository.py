"""
Authentication Repository Port - Storage for issued refresh tokens.
Implementation: forum_api/infrastructure/persistence/prisma_authentication_repository.py
"""

from abc import ABC, abstractmethod


class AuthenticationRepository(ABC):
    @abstractmethod
    async def add_token(self, token: str) -> None: ...

    @abstractmethod
    async def verify_token_exists(self, token: str) -> None:
        """Raises DomainValidationError if the refresh token is unknown."""
        ...

    @abstractmethod
    async def delete_token(self, token: str) -> None: ...
