"""Login User Use Case."""

import logging
from typing import Any, Mapping

from forum_api.application.common.interfaces import CommandHandler
from forum_api.domain.entities.authentication import NewAuth
from forum_api.domain.entities.user import UserLogin
from forum_api.domain.exceptions import AuthenticationError
from forum_api.domain.ports.repositories import AuthenticationRepository, UserRepository
from forum_api.domain.ports.security import AuthenticationTokenManager, PasswordHash

logger = logging.getLogger(__name__)


class LoginUserUseCase(CommandHandler[NewAuth]):
    def __init__(
        self,
        user_repository: UserRepository,
        authentication_repository: AuthenticationRepository,
        password_hash: PasswordHash,
        token_manager: AuthenticationTokenManager,
    ):
        self._user_repository = user_repository
        self._authentication_repository = authentication_repository
        self._password_hash = password_hash
        self._token_manager = token_manager

    async def execute(self, payload: Mapping[str, Any]) -> NewAuth:
        """
        Exchange username/password for an access + refresh token pair.

        Raises:
            MissingPropertyError / InvalidDataTypeError: bad payload
            AuthenticationError: unknown username or wrong password
        """
        user_login = UserLogin.from_payload(payload)

        user = await self._user_repository.get_user_by_username(user_login.username)
        if not user:
            raise AuthenticationError("Username or password is incorrect")

        await self._password_hash.compare(user_login.password, user.password)

        claims = {"id": user.id, "username": user.username}
        access_token = await self._token_manager.create_access_token(claims)
        refresh_token = await self._token_manager.create_refresh_token(claims)

        await self._authentication_repository.add_token(refresh_token)
        logger.info(f"[Login] {user.username} logged in")

        return NewAuth(access_token=access_token, refresh_token=refresh_token)
