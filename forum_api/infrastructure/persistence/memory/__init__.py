"""
In-memory persistence - dict/list backed repositories.

Used when PERSISTENCE_BACKEND=memory (local runs, tests). All repositories
built from the same InMemoryDatabase see the same data. Rows live in
insertion-ordered lists, so equal dates keep insertion order.
"""

from forum_api.infrastructure.persistence.memory.database import InMemoryDatabase
from forum_api.infrastructure.persistence.memory.repositories import (
    InMemoryAuthenticationRepository,
    InMemoryCommentRepository,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryDatabase",
    "InMemoryAuthenticationRepository",
    "InMemoryCommentRepository",
    "InMemoryReplyRepository",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
