"""
Add Thread Use Case.

- Validates the payload into an AddThread entity (fails before any I/O)
- Persists it through ThreadRepository
- Returns the AddedThread produced by the repository
"""

import logging
from typing import Any, Mapping

from forum_api.application.common.interfaces import CommandHandler
from forum_api.domain.entities.thread import AddThread, AddedThread
from forum_api.domain.ports.repositories import ThreadRepository

logger = logging.getLogger(__name__)


class AddThreadUseCase(CommandHandler[AddedThread]):
    _thread_repository: ThreadRepository

    def __init__(self, thread_repository: ThreadRepository):
        self._thread_repository = thread_repository

    async def execute(self, payload: Mapping[str, Any]) -> AddedThread:
        add_thread = AddThread.from_payload(payload)
        added_thread = await self._thread_repository.add_thread(add_thread)
        logger.info(f"[AddThread] {added_thread.id} created by {added_thread.owner}")
        return added_thread
