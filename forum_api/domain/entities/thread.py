"""
Thread entities - a top-level discussion post.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, ClassVar

from forum_api.domain.entities.payload import PayloadEntity, PayloadField

if TYPE_CHECKING:
    from forum_api.domain.entities.comment import DetailComment


@dataclass(frozen=True)
class AddThread(PayloadEntity):
    ENTITY: ClassVar[str] = "ADD_THREAD"
    SCHEMA: ClassVar[tuple[PayloadField, ...]] = (
        PayloadField("title", "title"),
        PayloadField("body", "body"),
        PayloadField("owner", "owner"),
    )

    title: str
    body: str
    owner: str


@dataclass(frozen=True)
class AddedThread:
    id: str
    title: str
    owner: str


@dataclass(frozen=True)
class Thread:
    id: str
    title: str
    body: str
    owner: str
    date: datetime
    username: str  # owner's username, joined by the repository


@dataclass(frozen=True)
class DetailThread:
    """Read model for GET /threads/{id}. Dates are ISO-8601 text."""

    id: str
    title: str
    body: str
    date: str
    username: str
    comments: list[DetailComment] = field(default_factory=list)
