"""
Comment Repository Port - Interface for comment persistence.
Implementation: forum_api/infrastructure/persistence/prisma_comment_repository.py
"""

from abc import ABC, abstractmethod

from forum_api.domain.entities.comment import AddComment, AddedComment, Comment


class CommentRepository(ABC):
    @abstractmethod
    async def add_comment(self, add_comment: AddComment) -> AddedComment: ...

    @abstractmethod
    async def get_comments_by_thread_id(self, thread_id: str) -> list[Comment]:
        """All comments of a thread, including soft-deleted ones, with username resolved."""
        ...

    @abstractmethod
    async def verify_comment_exists(self, comment_id: str, thread_id: str) -> None:
        """Raises EntityNotFoundError if the comment is not in the thread."""
        ...

    @abstractmethod
    async def verify_comment_owner(self, comment_id: str, owner: str) -> None:
        """Raises AccessDeniedError if ``owner`` did not write the comment."""
        ...

    @abstractmethod
    async def delete_comment(self, comment_id: str) -> None:
        """Soft delete: set is_delete, keep the row and its content."""
        ...
