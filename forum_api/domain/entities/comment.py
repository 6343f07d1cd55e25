"""
Comment entities - replies to a thread, with soft delete.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, ClassVar

from forum_api.domain.entities.payload import PayloadEntity, PayloadField

if TYPE_CHECKING:
    from forum_api.domain.entities.reply import DetailReply


@dataclass(frozen=True)
class AddComment(PayloadEntity):
    ENTITY: ClassVar[str] = "ADD_COMMENT"
    SCHEMA: ClassVar[tuple[PayloadField, ...]] = (
        PayloadField("content", "content"),
        PayloadField("threadId", "thread_id"),
        PayloadField("owner", "owner"),
    )

    content: str
    thread_id: str
    owner: str


@dataclass(frozen=True)
class AddedComment:
    id: str
    content: str
    owner: str


@dataclass(frozen=True)
class Comment:
    """Stored comment. ``content`` is kept even after soft delete."""

    id: str
    thread_id: str
    owner: str
    username: str
    date: datetime
    content: str
    is_delete: bool = False


@dataclass(frozen=True)
class DetailComment:
    id: str
    username: str
    date: str
    content: str
    replies: list[DetailReply] = field(default_factory=list)


@dataclass(frozen=True)
class DeleteComment(PayloadEntity):
    ENTITY: ClassVar[str] = "DELETE_COMMENT"
    SCHEMA: ClassVar[tuple[PayloadField, ...]] = (
        PayloadField("threadId", "thread_id"),
        PayloadField("commentId", "comment_id"),
        PayloadField("owner", "owner"),
    )

    thread_id: str
    comment_id: str
    owner: str
