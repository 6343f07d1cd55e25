"""
Authentication entities - token pairs and refresh-token payloads.
"""

from dataclasses import dataclass
from typing import ClassVar

from forum_api.domain.entities.payload import PayloadEntity, PayloadField


@dataclass(frozen=True)
class NewAuth:
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class RefreshAuthentication(PayloadEntity):
    ENTITY: ClassVar[str] = "REFRESH_AUTHENTICATION"
    SCHEMA: ClassVar[tuple[PayloadField, ...]] = (
        PayloadField("refreshToken", "refresh_token"),
    )

    refresh_token: str


@dataclass(frozen=True)
class DeleteAuthentication(PayloadEntity):
    ENTITY: ClassVar[str] = "DELETE_AUTHENTICATION"
    SCHEMA: ClassVar[tuple[PayloadField, ...]] = (
        PayloadField("refreshToken", "refresh_token"),
    )

    refresh_token: str
