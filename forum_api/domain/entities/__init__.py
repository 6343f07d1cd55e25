"""
ENTITIES - Business objects and command payloads

Each entity:
- Is a frozen dataclass (no ORM, no Pydantic)
- Command entities validate a raw payload via ``from_payload``
- Result entities are built by repositories and use cases
"""

from forum_api.domain.entities.authentication import (
    DeleteAuthentication,
    NewAuth,
    RefreshAuthentication,
)
from forum_api.domain.entities.comment import (
    AddComment,
    AddedComment,
    Comment,
    DeleteComment,
    DetailComment,
)
from forum_api.domain.entities.reply import (
    AddReply,
    AddedReply,
    DeleteReply,
    DetailReply,
    Reply,
)
from forum_api.domain.entities.thread import AddThread, AddedThread, DetailThread, Thread
from forum_api.domain.entities.user import RegisterUser, RegisteredUser, User, UserLogin

__all__ = [
    "AddComment",
    "AddReply",
    "AddThread",
    "AddedComment",
    "AddedReply",
    "AddedThread",
    "Comment",
    "DeleteAuthentication",
    "DeleteComment",
    "DeleteReply",
    "DetailComment",
    "DetailReply",
    "DetailThread",
    "NewAuth",
    "RefreshAuthentication",
    "RegisterUser",
    "RegisteredUser",
    "Reply",
    "Thread",
    "User",
    "UserLogin",
]
