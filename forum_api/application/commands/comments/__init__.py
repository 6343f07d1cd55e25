"""Comment commands."""

from .add_comment import AddCommentUseCase
from .delete_comment import DeleteCommentUseCase

__all__ = [
    "AddCommentUseCase",
    "DeleteCommentUseCase",
]
