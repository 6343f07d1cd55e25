"""
Add User Use Case - registration.

Steps:
1. Validate payload into RegisterUser (username length/characters included)
2. Check the username is not taken
3. Hash the password
4. Persist and return RegisteredUser (never the password)
"""

import logging
from dataclasses import replace
from typing import Any, Mapping

from forum_api.application.common.interfaces import CommandHandler
from forum_api.domain.entities.user import RegisterUser, RegisteredUser
from forum_api.domain.ports.repositories import UserRepository
from forum_api.domain.ports.security import PasswordHash

logger = logging.getLogger(__name__)


class AddUserUseCase(CommandHandler[RegisteredUser]):
    def __init__(self, user_repository: UserRepository, password_hash: PasswordHash):
        self._user_repository = user_repository
        self._password_hash = password_hash

    async def execute(self, payload: Mapping[str, Any]) -> RegisteredUser:
        register_user = RegisterUser.from_payload(payload)

        await self._user_repository.verify_username_available(register_user.username)

        hashed_password = await self._password_hash.hash(register_user.password)
        registered_user = await self._user_repository.add_user(
            replace(register_user, password=hashed_password)
        )
        logger.info(f"[AddUser] Registered {registered_user.username}")
        return registered_user
