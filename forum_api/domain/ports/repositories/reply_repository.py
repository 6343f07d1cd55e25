"""
Reply Repository Port - Interface for reply persistence.
Implementation: forum_api/infrastructure/persistence/prisma_reply_repository.py
"""

from abc import ABC, abstractmethod

from forum_api.domain.entities.reply import AddReply, AddedReply, Reply


class ReplyRepository(ABC):
    @abstractmethod
    async def add_reply(self, add_reply: AddReply) -> AddedReply: ...

    @abstractmethod
    async def get_replies_by_thread_id(self, thread_id: str) -> list[Reply]: ...

    @abstractmethod
    async def verify_reply_exists(self, reply_id: str, comment_id: str) -> None: ...

    @abstractmethod
    async def verify_reply_owner(self, reply_id: str, owner: str) -> None: ...

    @abstractmethod
    async def delete_reply(self, reply_id: str) -> None: ...
