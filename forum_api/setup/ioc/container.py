"""
Dishka DI Container Setup.

- AppProvider: security adapters (APP scope) and use cases (REQUEST scope)
- InMemoryRepositoryProvider / PrismaRepositoryProvider: repositories

Use cases only ask for the abstract ports (ThreadRepository, PasswordHash, ...);
which concrete class answers is decided by the repository provider picked in
create_container().

Flow:
  Container → provides → PrismaThreadRepository → to → AddThreadUseCase
                                    ↓
                            uses ThreadRepository interface
"""

from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from forum_api.application.commands.authentications import (
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshAuthenticationUseCase,
)
from forum_api.application.commands.comments import (
    AddCommentUseCase,
    DeleteCommentUseCase,
)
from forum_api.application.commands.replies import AddReplyUseCase, DeleteReplyUseCase
from forum_api.application.commands.threads import AddThreadUseCase
from forum_api.application.commands.users import AddUserUseCase
from forum_api.application.queries.threads import GetThreadUseCase
from forum_api.config.settings import Config
from forum_api.domain.ports.repositories import (
    AuthenticationRepository,
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)
from forum_api.domain.ports.security import AuthenticationTokenManager, PasswordHash
from forum_api.infrastructure.persistence.memory import (
    InMemoryAuthenticationRepository,
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryReplyRepository,
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from forum_api.infrastructure.security import BcryptPasswordHash, JwtTokenManager


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers security adapters and all use cases.
    """

    # ==================== SECURITY ====================

    @provide(scope=Scope.APP)
    def get_password_hash(self) -> PasswordHash:
        return BcryptPasswordHash(rounds=Config.BCRYPT_ROUNDS)

    @provide(scope=Scope.APP)
    def get_token_manager(self) -> AuthenticationTokenManager:
        return JwtTokenManager(
            access_token_key=Config.ACCESS_TOKEN_KEY,
            refresh_token_key=Config.REFRESH_TOKEN_KEY,
            access_token_age=Config.ACCESS_TOKEN_AGE,
            algorithm=Config.TOKEN_ALGORITHM,
        )

    # ==================== USERS & AUTHENTICATIONS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_user_use_case(
        self, user_repository: UserRepository, password_hash: PasswordHash
    ) -> AddUserUseCase:
        return AddUserUseCase(user_repository, password_hash)

    @provide(scope=Scope.REQUEST)
    def get_login_user_use_case(
        self,
        user_repository: UserRepository,
        authentication_repository: AuthenticationRepository,
        password_hash: PasswordHash,
        token_manager: AuthenticationTokenManager,
    ) -> LoginUserUseCase:
        return LoginUserUseCase(
            user_repository=user_repository,
            authentication_repository=authentication_repository,
            password_hash=password_hash,
            token_manager=token_manager,
        )

    @provide(scope=Scope.REQUEST)
    def get_refresh_authentication_use_case(
        self,
        authentication_repository: AuthenticationRepository,
        token_manager: AuthenticationTokenManager,
    ) -> RefreshAuthenticationUseCase:
        return RefreshAuthenticationUseCase(authentication_repository, token_manager)

    @provide(scope=Scope.REQUEST)
    def get_logout_user_use_case(
        self, authentication_repository: AuthenticationRepository
    ) -> LogoutUserUseCase:
        return LogoutUserUseCase(authentication_repository)

    # ==================== THREADS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_thread_use_case(
        self, thread_repository: ThreadRepository
    ) -> AddThreadUseCase:
        return AddThreadUseCase(thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> GetThreadUseCase:
        return GetThreadUseCase(thread_repository, comment_repository, reply_repository)

    # ==================== COMMENTS ====================

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> AddCommentUseCase:
        return AddCommentUseCase(thread_repository, comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(thread_repository, comment_repository)

    # ==================== REPLIES ====================

    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> AddReplyUseCase:
        return AddReplyUseCase(thread_repository, comment_repository, reply_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> DeleteReplyUseCase:
        return DeleteReplyUseCase(
            thread_repository, comment_repository, reply_repository
        )


class InMemoryRepositoryProvider(Provider):
    """
    Repositories backed by a single InMemoryDatabase (APP scope).

    Pass a database to share it with the caller (tests seed rows directly).
    """

    def __init__(self, database: Optional[InMemoryDatabase] = None):
        super().__init__()
        self._database = database or InMemoryDatabase()

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        return self._database

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, database: InMemoryDatabase) -> UserRepository:
        return InMemoryUserRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_authentication_repository(
        self, database: InMemoryDatabase
    ) -> AuthenticationRepository:
        return InMemoryAuthenticationRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, database: InMemoryDatabase) -> ThreadRepository:
        return InMemoryThreadRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, database: InMemoryDatabase) -> CommentRepository:
        return InMemoryCommentRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, database: InMemoryDatabase) -> ReplyRepository:
        return InMemoryReplyRepository(database)


def create_container(
    backend: Optional[str] = None,
    database: Optional[InMemoryDatabase] = None,
) -> AsyncContainer:
    """
    Create and configure the DI container.

    Args:
        backend: "prisma" or "memory"; defaults to Config.PERSISTENCE_BACKEND
        database: Optional shared InMemoryDatabase for the "memory" backend

    - Call this ONCE at app startup
    """
    backend = backend or Config.PERSISTENCE_BACKEND

    if backend == "memory":
        repository_provider: Provider = InMemoryRepositoryProvider(database)
    elif backend == "prisma":
        # Needs a generated Prisma client, so only imported when selected
        from forum_api.setup.ioc.prisma_provider import PrismaRepositoryProvider

        repository_provider = PrismaRepositoryProvider()
    else:
        raise ValueError(f"Unknown persistence backend: {backend}")

    return make_async_container(AppProvider(), repository_provider)
