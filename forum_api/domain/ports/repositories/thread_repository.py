"""
Thread Repository Port - Interface for thread persistence.
Implementation: forum_api/infrastructure/persistence/prisma_thread_repository.py
"""

from abc import ABC, abstractmethod

from forum_api.domain.entities.thread import AddThread, AddedThread, Thread


class ThreadRepository(ABC):
    @abstractmethod
    async def add_thread(self, add_thread: AddThread) -> AddedThread: ...

    @abstractmethod
    async def get_thread_by_id(self, thread_id: str) -> Thread:
        """Raises EntityNotFoundError if the thread does not exist."""
        ...

    @abstractmethod
    async def verify_thread_exists(self, thread_id: str) -> None:
        """Raises EntityNotFoundError if the thread does not exist."""
        ...
