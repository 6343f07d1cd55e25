"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the use cases need
- Does NOT specify implementation (Prisma, in-memory, etc.)

Lookups that can fail raise domain exceptions (EntityNotFoundError,
AccessDeniedError, ...) instead of returning sentinel values.
"""

from forum_api.domain.ports.repositories.authentication_repository import (
    AuthenticationRepository,
)
from forum_api.domain.ports.repositories.comment_repository import CommentRepository
from forum_api.domain.ports.repositories.reply_repository import ReplyRepository
from forum_api.domain.ports.repositories.thread_repository import ThreadRepository
from forum_api.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "AuthenticationRepository",
    "CommentRepository",
    "ReplyRepository",
    "ThreadRepository",
    "UserRepository",
]
