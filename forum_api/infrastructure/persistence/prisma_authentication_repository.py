"""
Prisma Authentication Repository Implementation.

Stores issued refresh tokens; a token is valid for refresh only while its
row exists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from forum_api.domain.exceptions import DomainValidationError
from forum_api.domain.ports.repositories.authentication_repository import (
    AuthenticationRepository,
)

if TYPE_CHECKING:
    from prisma import Prisma


class PrismaAuthenticationRepository(AuthenticationRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def add_token(self, token: str) -> None:
        await self._prisma.authentication.create(data={"token": token})

    async def verify_token_exists(self, token: str) -> None:
        record = await self._prisma.authentication.find_unique(where={"token": token})
        if not record:
            raise DomainValidationError("REFRESH_TOKEN.NOT_FOUND")

    async def delete_token(self, token: str) -> None:
        await self._prisma.authentication.delete_many(where={"token": token})
