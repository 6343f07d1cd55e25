"""
User Repository Port - Interface for user persistence.
Implementation: forum_api/infrastructure/persistence/prisma_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from forum_api.domain.entities.user import RegisterUser, RegisteredUser, User


class UserRepository(ABC):
    @abstractmethod
    async def add_user(self, register_user: RegisterUser) -> RegisteredUser:
        """Persist a user; ``register_user.password`` is already hashed."""
        ...

    @abstractmethod
    async def verify_username_available(self, username: str) -> None:
        """Raises ConflictError if the username is taken."""
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]: ...
