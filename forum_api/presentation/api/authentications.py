"""
Authentications API Router - login, token refresh, logout.

Request bodies:
    POST   {"username": "...", "password": "..."}
    PUT    {"refreshToken": "..."}
    DELETE {"refreshToken": "..."}
"""

from typing import Any, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, status
from pydantic import BaseModel

from forum_api.application.commands.authentications import (
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshAuthenticationUseCase,
)
from forum_api.presentation.api.envelope import Envelope, MessageEnvelope


class NewAuthData(BaseModel):
    accessToken: str
    refreshToken: str


class AccessTokenData(BaseModel):
    accessToken: str


router = APIRouter(prefix="/authentications", tags=["authentications"])


@router.post(
    "",
    response_model=Envelope[NewAuthData],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def login(
    use_case: FromDishka[LoginUserUseCase],
    payload: Optional[dict[str, Any]] = Body(default=None),
):
    new_auth = await use_case.execute(payload or {})
    return Envelope[NewAuthData](
        data=NewAuthData(
            accessToken=new_auth.access_token,
            refreshToken=new_auth.refresh_token,
        )
    )


@router.put(
    "",
    response_model=Envelope[AccessTokenData],
    status_code=status.HTTP_200_OK,
)
@inject
async def refresh_access_token(
    use_case: FromDishka[RefreshAuthenticationUseCase],
    payload: Optional[dict[str, Any]] = Body(default=None),
):
    access_token = await use_case.execute(payload or {})
    return Envelope[AccessTokenData](data=AccessTokenData(accessToken=access_token))


@router.delete(
    "",
    response_model=MessageEnvelope,
    status_code=status.HTTP_200_OK,
)
@inject
async def logout(
    use_case: FromDishka[LogoutUserUseCase],
    payload: Optional[dict[str, Any]] = Body(default=None),
):
    await use_case.execute(payload or {})
    return MessageEnvelope(message="refresh token deleted")
