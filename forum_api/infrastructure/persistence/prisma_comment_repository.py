"""
Prisma Comment Repository Implementation.

Prisma Comment Model (from prisma/schema.prisma):
    model Comment {
        id        String   @id
        thread_id String
        owner     String
        content   String
        date      DateTime @default(now())
        is_delete Boolean  @default(false)
        thread    Thread   @relation(...)
        user      User     @relation(...)
    }

Soft delete:
    delete_comment() only flips is_delete with a single conditional
    update_many; the row and its content stay in the table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from forum_api.domain.entities.comment import AddComment, AddedComment, Comment
from forum_api.domain.exceptions import AccessDeniedError, EntityNotFoundError
from forum_api.domain.ports.repositories.comment_repository import CommentRepository

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Comment as PrismaComment

class PrismaCommentRepository(CommentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaComment) -> Comment:
        return Comment(
            id=record.id,
            thread_id=record.thread_id,
            owner=record.owner,
            username=record.user.username,
            date=record.date,
            content=record.content,
            is_delete=record.is_delete,
        )

    async def add_comment(self, add_comment: AddComment) -> AddedComment:
        record = await self._prisma.comment.create(
            data={
                "id": f"comment-{uuid4().hex}",
                "thread_id": add_comment.thread_id,
                "owner": add_comment.owner,
                "content": add_comment.content,
            }
        )
        return AddedComment(id=record.id, content=record.content, owner=record.owner)

    async def get_comments_by_thread_id(self, thread_id: str) -> list[Comment]:
        records = await self._prisma.comment.find_many(
            where={"thread_id": thread_id},
            include={"user": True},
            order={"date": "asc"},
        )
        return [self._to_entity(record) for record in records]

    async def verify_comment_exists(self, comment_id: str, thread_id: str) -> None:
        record = await self._prisma.comment.find_first(
            where={"id": comment_id, "thread_id": thread_id}
        )
        if not record:
            raise EntityNotFoundError(f"Comment {comment_id} not found")

    async def verify_comment_owner(self, comment_id: str, owner: str) -> None:
        record = await self._prisma.comment.find_unique(where={"id": comment_id})
        if not record:
            raise EntityNotFoundError(f"Comment {comment_id} not found")
        if record.owner != owner:
            raise AccessDeniedError("You are not the owner of this comment")

    async def delete_comment(self, comment_id: str) -> None:
        updated = await self._prisma.comment.update_many(
            where={"id": comment_id}, data={"is_delete": True}
        )
        if updated == 0:
            raise EntityNotFoundError(f"Comment {comment_id} not found")
