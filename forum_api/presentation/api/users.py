"""
Users API Router - registration.

Flow:
  HTTP Request → Router → AddUserUseCase → UserRepository → Database
"""

from typing import Any, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, status
from pydantic import BaseModel

from forum_api.application.commands.users import AddUserUseCase
from forum_api.presentation.api.envelope import Envelope


class AddedUserDTO(BaseModel):
    id: str
    username: str
    fullname: str


class AddUserData(BaseModel):
    addedUser: AddedUserDTO


router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=Envelope[AddUserData],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register_user(
    use_case: FromDishka[AddUserUseCase],
    payload: Optional[dict[str, Any]] = Body(default=None),
):
    """Register a new user."""
    registered_user = await use_case.execute(payload or {})

    return Envelope[AddUserData](
        data=AddUserData(
            addedUser=AddedUserDTO(
                id=registered_user.id,
                username=registered_user.username,
                fullname=registered_user.fullname,
            )
        )
    )
