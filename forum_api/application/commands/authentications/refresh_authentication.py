"""Refresh Authentication Use Case - trade a refresh token for a new access token."""

from typing import Any, Mapping

from forum_api.application.common.interfaces import CommandHandler
from forum_api.domain.entities.authentication import RefreshAuthentication
from forum_api.domain.ports.repositories import AuthenticationRepository
from forum_api.domain.ports.security import AuthenticationTokenManager


class RefreshAuthenticationUseCase(CommandHandler[str]):
    def __init__(
        self,
        authentication_repository: AuthenticationRepository,
        token_manager: AuthenticationTokenManager,
    ):
        self._authentication_repository = authentication_repository
        self._token_manager = token_manager

    async def execute(self, payload: Mapping[str, Any]) -> str:
        command = RefreshAuthentication.from_payload(payload)

        await self._token_manager.verify_refresh_token(command.refresh_token)
        await self._authentication_repository.verify_token_exists(
            command.refresh_token
        )

        claims = await self._token_manager.decode_payload(command.refresh_token)
        return await self._token_manager.create_access_token(
            {"id": claims["id"], "username": claims["username"]}
        )
