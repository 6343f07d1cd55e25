"""
Bcrypt implementation of the PasswordHash port.

Hashing is CPU-bound, so it runs in a worker thread to keep the event loop free.
"""

import asyncio

import bcrypt

from forum_api.domain.exceptions import AuthenticationError
from forum_api.domain.ports.security import PasswordHash


class BcryptPasswordHash(PasswordHash):
    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        hashed = await asyncio.to_thread(
            bcrypt.hashpw,
            bytes(password, encoding="utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return hashed.decode("utf-8")

    async def compare(self, password: str, hashed_password: str) -> None:
        matched = await asyncio.to_thread(
            bcrypt.checkpw,
            bytes(password, encoding="utf-8"),
            bytes(hashed_password, encoding="utf-8"),
        )
        if not matched:
            raise AuthenticationError("Username or password is incorrect")
