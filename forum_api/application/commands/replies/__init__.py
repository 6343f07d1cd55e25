"""Reply commands."""

from .add_reply import AddReplyUseCase
from .delete_reply import DeleteReplyUseCase

__all__ = [
    "AddReplyUseCase",
    "DeleteReplyUseCase",
]
