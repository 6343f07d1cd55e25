"""Thread queries."""

from forum_api.application.queries.threads.get_thread import (
    DELETED_COMMENT_CONTENT,
    DELETED_REPLY_CONTENT,
    GetThreadUseCase,
)

__all__ = [
    "DELETED_COMMENT_CONTENT",
    "DELETED_REPLY_CONTENT",
    "GetThreadUseCase",
]
