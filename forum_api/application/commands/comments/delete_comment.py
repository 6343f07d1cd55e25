"""Delete Comment Use Case."""

import logging
from typing import Any, Mapping

from forum_api.application.common.interfaces import CommandHandler
from forum_api.domain.entities.comment import DeleteComment
from forum_api.domain.ports.repositories import CommentRepository, ThreadRepository

logger = logging.getLogger(__name__)


class DeleteCommentUseCase(CommandHandler[None]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ):
        self._thread_repository = thread_repository
        self._comment_repository = comment_repository

    async def execute(self, payload: Mapping[str, Any]) -> None:
        """
        Soft-delete a comment owned by the requester.

        Steps:
        1. Verify thread exists
        2. Verify comment exists in that thread
        3. Verify requester owns the comment
        4. Mark the comment as deleted (row and content are kept)

        Raises:
            EntityNotFoundError: If thread or comment doesn't exist
            AccessDeniedError: If requester is not the comment's owner
        """
        command = DeleteComment.from_payload(payload)

        await self._thread_repository.verify_thread_exists(command.thread_id)
        await self._comment_repository.verify_comment_exists(
            command.comment_id, command.thread_id
        )
        await self._comment_repository.verify_comment_owner(
            command.comment_id, command.owner
        )
        await self._comment_repository.delete_comment(command.comment_id)
        logger.info(f"[DeleteComment] {command.comment_id} soft-deleted")
