"""Add Reply Use Case."""

from typing import Any, Mapping

from forum_api.application.common.interfaces import CommandHandler
from forum_api.domain.entities.reply import AddReply, AddedReply
from forum_api.domain.ports.repositories import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)


class AddReplyUseCase(CommandHandler[AddedReply]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ):
        self._thread_repository = thread_repository
        self._comment_repository = comment_repository
        self._reply_repository = reply_repository

    async def execute(self, payload: Mapping[str, Any]) -> AddedReply:
        add_reply = AddReply.from_payload(payload)

        await self._thread_repository.verify_thread_exists(add_reply.thread_id)
        await self._comment_repository.verify_comment_exists(
            add_reply.comment_id, add_reply.thread_id
        )

        return await self._reply_repository.add_reply(add_reply)
