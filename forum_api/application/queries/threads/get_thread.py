"""
GetThread Query - Thread detail with its comments and their replies.

This is the public read path for GET /threads/{threadId}.

Ordering:
    Comments (and replies within a comment) are sorted ascending by date
    here, whatever order the repository returns them in. ``sorted`` is
    stable, so equal dates keep the repository's insertion order.

Redaction:
    Soft-deleted items are still returned by repositories with their original
    content. The content is swapped for a fixed marker only in the returned
    read model; the stored entities are left untouched.
"""

import logging
from collections import defaultdict
from datetime import datetime, timezone
from typing import Union

from forum_api.application.common.interfaces import QueryHandler
from forum_api.domain.entities.comment import Comment, DetailComment
from forum_api.domain.entities.reply import DetailReply, Reply
from forum_api.domain.entities.thread import DetailThread
from forum_api.domain.ports.repositories import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)

logger = logging.getLogger(__name__)

DELETED_COMMENT_CONTENT = "**komentar telah dihapus**"
DELETED_REPLY_CONTENT = "**balasan telah dihapus**"


def _presented_content(item: Union[Comment, Reply], marker: str) -> str:
    return marker if item.is_delete else item.content


def _to_iso(value: datetime) -> str:
    # Always UTC, millisecond precision, "Z" suffix: 2021-08-08T07:19:09.775Z
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def _detail_reply(reply: Reply) -> DetailReply:
    return DetailReply(
        id=reply.id,
        username=reply.username,
        date=_to_iso(reply.date),
        content=_presented_content(reply, DELETED_REPLY_CONTENT),
    )


def _detail_comment(comment: Comment, replies: list[Reply]) -> DetailComment:
    return DetailComment(
        id=comment.id,
        username=comment.username,
        date=_to_iso(comment.date),
        content=_presented_content(comment, DELETED_COMMENT_CONTENT),
        replies=[
            _detail_reply(reply)
            for reply in sorted(replies, key=lambda reply: reply.date)
        ],
    )


class GetThreadUseCase(QueryHandler[DetailThread]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ):
        self._thread_repository = thread_repository
        self._comment_repository = comment_repository
        self._reply_repository = reply_repository

    async def execute(self, thread_id: str) -> DetailThread:
        """
        Build the thread detail read model.

        Steps:
        1. Load thread (fails before touching comments)
        2. Load comments and replies of the thread
        3. Group replies per comment, sort, redact, format dates

        Raises:
            EntityNotFoundError: If thread doesn't exist
        """
        # 1. Get thread
        thread = await self._thread_repository.get_thread_by_id(thread_id)

        # 2. Load comments and replies
        comments = await self._comment_repository.get_comments_by_thread_id(thread_id)
        replies = await self._reply_repository.get_replies_by_thread_id(thread_id)

        replies_by_comment: dict[str, list[Reply]] = defaultdict(list)
        for reply in replies:
            replies_by_comment[reply.comment_id].append(reply)

        # 3. Compose read model
        detail_comments = [
            _detail_comment(comment, replies_by_comment[comment.id])
            for comment in sorted(comments, key=lambda comment: comment.date)
        ]
        logger.debug(
            f"[GetThread] {thread_id}: {len(detail_comments)} comments, "
            f"{len(replies)} replies"
        )

        return DetailThread(
            id=thread.id,
            title=thread.title,
            body=thread.body,
            date=_to_iso(thread.date),
            username=thread.username,
            comments=detail_comments,
        )
