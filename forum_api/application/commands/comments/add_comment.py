"""Add Comment Use Case."""

import logging
from typing import Any, Mapping

from forum_api.application.common.interfaces import CommandHandler
from forum_api.domain.entities.comment import AddComment, AddedComment
from forum_api.domain.ports.repositories import CommentRepository, ThreadRepository

logger = logging.getLogger(__name__)


class AddCommentUseCase(CommandHandler[AddedComment]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ):
        self._thread_repository = thread_repository
        self._comment_repository = comment_repository

    async def execute(self, payload: Mapping[str, Any]) -> AddedComment:
        add_comment = AddComment.from_payload(payload)

        await self._thread_repository.verify_thread_exists(add_comment.thread_id)

        added_comment = await self._comment_repository.add_comment(add_comment)
        logger.info(
            f"[AddComment] {added_comment.id} added to {add_comment.thread_id}"
        )
        return added_comment
