"""
InMemoryDatabase - the shared tables behind the in-memory repositories.

Rows are plain dicts with the same column names as prisma/schema.prisma.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

Row = dict[str, Any]


def generate_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex}"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InMemoryDatabase:
    users: list[Row] = field(default_factory=list)
    threads: list[Row] = field(default_factory=list)
    comments: list[Row] = field(default_factory=list)
    replies: list[Row] = field(default_factory=list)
    authentications: list[str] = field(default_factory=list)

    @staticmethod
    def find(table: list[Row], **where: Any) -> Optional[Row]:
        for row in table:
            if all(row.get(key) == value for key, value in where.items()):
                return row
        return None

    def username_of(self, user_id: str) -> str:
        user = self.find(self.users, id=user_id)
        return user["username"] if user else ""

    def clear(self) -> None:
        self.users.clear()
        self.threads.clear()
        self.comments.clear()
        self.replies.clear()
        self.authentications.clear()
