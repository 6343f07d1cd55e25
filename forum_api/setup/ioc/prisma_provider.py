"""
Prisma repository provider.

Imported lazily by create_container() because `prisma` refuses to import
until `prisma generate` has produced the client.
"""

import logging
from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from forum_api.domain.ports.repositories import (
    AuthenticationRepository,
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)
from forum_api.infrastructure.persistence.prisma_authentication_repository import (
    PrismaAuthenticationRepository,
)
from forum_api.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)
from forum_api.infrastructure.persistence.prisma_reply_repository import (
    PrismaReplyRepository,
)
from forum_api.infrastructure.persistence.prisma_thread_repository import (
    PrismaThreadRepository,
)
from forum_api.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)

logger = logging.getLogger(__name__)


class PrismaRepositoryProvider(Provider):
    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = connected ONCE, shared across all requests
        - Disconnected when the container is closed on shutdown
        """
        prisma = Prisma()
        await prisma.connect()
        logger.info("Prisma client connected")
        yield prisma
        await prisma.disconnect()
        logger.info("Prisma client disconnected")

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_authentication_repository(self, prisma: Prisma) -> AuthenticationRepository:
        return PrismaAuthenticationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, prisma: Prisma) -> ThreadRepository:
        return PrismaThreadRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        return PrismaCommentRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, prisma: Prisma) -> ReplyRepository:
        return PrismaReplyRepository(prisma)
