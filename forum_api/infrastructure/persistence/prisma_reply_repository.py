"""
Prisma Reply Repository Implementation.

Replies belong to a comment; the thread they are listed under is reached
through the ``comment`` relation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from forum_api.domain.entities.reply import AddReply, AddedReply, Reply
from forum_api.domain.exceptions import AccessDeniedError, EntityNotFoundError
from forum_api.domain.ports.repositories.reply_repository import ReplyRepository

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Reply as PrismaReply

class PrismaReplyRepository(ReplyRepository):
    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaReply) -> Reply:
        return Reply(
            id=record.id,
            comment_id=record.comment_id,
            owner=record.owner,
            username=record.user.username,
            date=record.date,
            content=record.content,
            is_delete=record.is_delete,
        )

    async def add_reply(self, add_reply: AddReply) -> AddedReply:
        record = await self._prisma.reply.create(
            data={
                "id": f"reply-{uuid4().hex}",
                "comment_id": add_reply.comment_id,
                "owner": add_reply.owner,
                "content": add_reply.content,
            }
        )
        return AddedReply(id=record.id, content=record.content, owner=record.owner)

    async def get_replies_by_thread_id(self, thread_id: str) -> list[Reply]:
        records = await self._prisma.reply.find_many(
            where={"comment": {"is": {"thread_id": thread_id}}},
            include={"user": True},
            order={"date": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def verify_reply_exists(self, reply_id: str, comment_id: str) -> None:
        record = await self._prisma.reply.find_first(
            where={"id": reply_id, "comment_id": comment_id}
        )
        if not record:
            raise EntityNotFoundError(f"Reply {reply_id} not found")

    async def verify_reply_owner(self, reply_id: str, owner: str) -> None:
        record = await self._prisma.reply.find_unique(where={"id": reply_id})
        if not record:
            raise EntityNotFoundError(f"Reply {reply_id} not found")
        if record.owner != owner:
            raise AccessDeniedError("You are not the owner of this reply")

    async def delete_reply(self, reply_id: str) -> None:
        updated = await self._prisma.reply.update_many(
            where={"id": reply_id}, data={"is_delete": True}
        )
        if updated == 0:
            raise EntityNotFoundError(f"Reply {reply_id} not found")
