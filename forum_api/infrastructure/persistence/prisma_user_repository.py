"""
Prisma User Repository Implementation.

Prisma User Model (from prisma/schema.prisma):
    model User {
        id       String @id
        username String @unique @db.VarChar(50)
        password String
        fullname String
    }

Uniqueness:
    verify_username_available() is a fast pre-check; the @unique index is
    what actually guarantees it. A concurrent registration that loses the
    race surfaces as ConflictError from add_user().
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import uuid4

from prisma.errors import UniqueViolationError

from forum_api.domain.entities.user import RegisterUser, RegisteredUser, User
from forum_api.domain.exceptions import ConflictError
from forum_api.domain.ports.repositories.user_repository import UserRepository

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    async def add_user(self, register_user: RegisterUser) -> RegisteredUser:
        try:
            record = await self._prisma.user.create(
                data={
                    "id": f"user-{uuid4().hex}",
                    "username": register_user.username,
                    "password": register_user.password,
                    "fullname": register_user.fullname,
                }
            )
        except UniqueViolationError as e:
            logger.info(f"[UserRepository] {register_user.username} taken on insert")
            raise ConflictError(
                f"Username {register_user.username} is not available"
            ) from e

        return RegisteredUser(
            id=record.id, username=record.username, fullname=record.fullname
        )

    async def verify_username_available(self, username: str) -> None:
        record = await self._prisma.user.find_unique(where={"username": username})
        if record:
            raise ConflictError(f"Username {username} is not available")

    async def get_user_by_username(self, username: str) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"username": username})
        if not record:
            return None
        return User(
            id=record.id,
            username=record.username,
            password=record.password,
            fullname=record.fullname,
        )
