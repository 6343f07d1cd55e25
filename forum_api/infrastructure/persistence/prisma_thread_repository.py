"""
Prisma Thread Repository Implementation.

Prisma Thread Model (from prisma/schema.prisma):
    model Thread {
        id    String   @id
        title String
        body  String
        owner String
        date  DateTime @default(now())
        user  User     @relation(fields: [owner], references: [id])
    }

Mapping:
- Thread.username comes from the joined ``user`` relation
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from forum_api.domain.entities.thread import AddThread, AddedThread, Thread
from forum_api.domain.exceptions import EntityNotFoundError
from forum_api.domain.ports.repositories.thread_repository import ThreadRepository

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Thread as PrismaThread

class PrismaThreadRepository(ThreadRepository):
    """
    Prisma implementation of ThreadRepository.

    Handles persistence of threads to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaThread) -> Thread:
        return Thread(
            id=record.id,
            title=record.title,
            body=record.body,
            owner=record.owner,
            date=record.date,
            username=record.user.username,
        )

    async def add_thread(self, add_thread: AddThread) -> AddedThread:
        record = await self._prisma.thread.create(
            data={
                "id": f"thread-{uuid4().hex}",
                "title": add_thread.title,
                "body": add_thread.body,
                "owner": add_thread.owner,
            }
        )
        return AddedThread(id=record.id, title=record.title, owner=record.owner)

    async def get_thread_by_id(self, thread_id: str) -> Thread:
        record = await self._prisma.thread.find_unique(
            where={"id": thread_id}, include={"user": True}
        )
        if not record:
            raise EntityNotFoundError(f"Thread {thread_id} not found")
        return self._to_entity(record)

    async def verify_thread_exists(self, thread_id: str) -> None:
        count = await self._prisma.thread.count(where={"id": thread_id})
        if count == 0:
            raise EntityNotFoundError(f"Thread {thread_id} not found")
