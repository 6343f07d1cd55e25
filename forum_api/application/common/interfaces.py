"""
Base interfaces for the use-case layer.

Usage:
    class AddThreadUseCase(CommandHandler[AddedThread]):
        def __init__(self, thread_repository: ThreadRepository):
            self._thread_repository = thread_repository

        async def execute(self, payload: Mapping[str, Any]) -> AddedThread:
            add_thread = AddThread.from_payload(payload)
            return await self._thread_repository.add_thread(add_thread)

Commands receive the raw payload (already merged with the authenticated
owner id and path params by the adapter) and validate it themselves.
"""
from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, payload: Mapping[str, Any]) -> T:
        """Validate the payload, perform the write and return a result of type T"""
        ...


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, *args: Any) -> T:
        """Run the read and return a result of type T"""
        ...
