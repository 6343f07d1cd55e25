"""
User entities - registration, login and the stored user record.
"""

import re
from dataclasses import dataclass
from typing import ClassVar

from forum_api.domain.entities.payload import PayloadEntity, PayloadField
from forum_api.domain.exceptions import DomainValidationError

USERNAME_MAX_LENGTH = 50
_USERNAME_PATTERN = re.compile(r"\w+", re.ASCII)


@dataclass(frozen=True)
class User:
    id: str
    username: str
    password: str  # hashed
    fullname: str


@dataclass(frozen=True)
class RegisterUser(PayloadEntity):
    ENTITY: ClassVar[str] = "REGISTER_USER"
    SCHEMA: ClassVar[tuple[PayloadField, ...]] = (
        PayloadField("username", "username"),
        PayloadField("password", "password"),
        PayloadField("fullname", "fullname"),
    )

    username: str
    password: str
    fullname: str

    def __post_init__(self):
        if len(self.username) > USERNAME_MAX_LENGTH:
            raise DomainValidationError(
                f"{self.ENTITY}.USERNAME_LIMIT_CHAR"
            )
        if not _USERNAME_PATTERN.fullmatch(self.username):
            raise DomainValidationError(
                f"{self.ENTITY}.USERNAME_CONTAIN_RESTRICTED_CHARACTER"
            )


@dataclass(frozen=True)
class RegisteredUser:
    id: str
    username: str
    fullname: str


@dataclass(frozen=True)
class UserLogin(PayloadEntity):
    ENTITY: ClassVar[str] = "USER_LOGIN"
    SCHEMA: ClassVar[tuple[PayloadField, ...]] = (
        PayloadField("username", "username"),
        PayloadField("password", "password"),
    )

    username: str
    password: str
