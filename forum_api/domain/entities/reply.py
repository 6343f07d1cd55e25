"""
Reply entities - answers to a comment, with soft delete.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from forum_api.domain.entities.payload import PayloadEntity, PayloadField


@dataclass(frozen=True)
class AddReply(PayloadEntity):
    ENTITY: ClassVar[str] = "ADD_REPLY"
    SCHEMA: ClassVar[tuple[PayloadField, ...]] = (
        PayloadField("content", "content"),
        PayloadField("threadId", "thread_id"),
        PayloadField("commentId", "comment_id"),
        PayloadField("owner", "owner"),
    )

    content: str
    thread_id: str
    comment_id: str
    owner: str


@dataclass(frozen=True)
class AddedReply:
    id: str
    content: str
    owner: str


@dataclass(frozen=True)
class Reply:
    id: str
    comment_id: str
    owner: str
    username: str
    date: datetime
    content: str
    is_delete: bool = False


@dataclass(frozen=True)
class DetailReply:
    id: str
    username: str
    date: str
    content: str


@dataclass(frozen=True)
class DeleteReply(PayloadEntity):
    ENTITY: ClassVar[str] = "DELETE_REPLY"
    SCHEMA: ClassVar[tuple[PayloadField, ...]] = (
        PayloadField("threadId", "thread_id"),
        PayloadField("commentId", "comment_id"),
        PayloadField("replyId", "reply_id"),
        PayloadField("owner", "owner"),
    )

    thread_id: str
    comment_id: str
    reply_id: str
    owner: str
