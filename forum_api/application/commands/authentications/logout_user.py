"""Logout User Use Case - revoke a refresh token."""

from typing import Any, Mapping

from forum_api.application.common.interfaces import CommandHandler
from forum_api.domain.entities.authentication import DeleteAuthentication
from forum_api.domain.ports.repositories import AuthenticationRepository


class LogoutUserUseCase(CommandHandler[None]):
    def __init__(self, authentication_repository: AuthenticationRepository):
        self._authentication_repository = authentication_repository

    async def execute(self, payload: Mapping[str, Any]) -> None:
        command = DeleteAuthentication.from_payload(payload)

        await self._authentication_repository.verify_token_exists(
            command.refresh_token
        )
        await self._authentication_repository.delete_token(command.refresh_token)
