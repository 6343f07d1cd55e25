"""Thread commands."""

from .add_thread import AddThreadUseCase

__all__ = ["AddThreadUseCase"]
