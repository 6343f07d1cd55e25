"""Delete Reply Use Case."""

from typing import Any, Mapping

from forum_api.application.common.interfaces import CommandHandler
from forum_api.domain.entities.reply import DeleteReply
from forum_api.domain.ports.repositories import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)


class DeleteReplyUseCase(CommandHandler[None]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ):
        self._thread_repository = thread_repository
        self._comment_repository = comment_repository
        self._reply_repository = reply_repository

    async def execute(self, payload: Mapping[str, Any]) -> None:
        command = DeleteReply.from_payload(payload)

        await self._thread_repository.verify_thread_exists(command.thread_id)
        await self._comment_repository.verify_comment_exists(
            command.comment_id, command.thread_id
        )
        await self._reply_repository.verify_reply_exists(
            command.reply_id, command.comment_id
        )
        await self._reply_repository.verify_reply_owner(
            command.reply_id, command.owner
        )
        await self._reply_repository.delete_reply(command.reply_id)
