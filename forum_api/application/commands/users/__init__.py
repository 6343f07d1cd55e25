"""User commands."""

from .add_user import AddUserUseCase

__all__ = ["AddUserUseCase"]
