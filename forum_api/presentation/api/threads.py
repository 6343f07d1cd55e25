"""
Threads API Router - create a thread, read thread detail.

Flow:
  HTTP Request → Router → UseCase → Repositories → Database
                                 ↓
  HTTP Response ← Router ← DetailThread (dates already ISO-8601 text)
"""

from dataclasses import asdict
from typing import Any, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel

from forum_api.application.commands.threads import AddThreadUseCase
from forum_api.application.queries.threads import GetThreadUseCase
from forum_api.presentation.api.envelope import Envelope
from forum_api.presentation.dependencies.auth import AuthUser, get_current_user

# ==================== REQUEST/RESPONSE MODELS ====================


class AddedThreadDTO(BaseModel):
    id: str
    title: str
    owner: str


class AddThreadData(BaseModel):
    addedThread: AddedThreadDTO


class ReplyDTO(BaseModel):
    id: str
    username: str
    date: str
    content: str


class CommentDTO(BaseModel):
    id: str
    username: str
    date: str
    content: str
    replies: list[ReplyDTO] = []


class DetailThreadDTO(BaseModel):
    """
    {
        "id": "thread-...",
        "title": "...",
        "body": "...",
        "date": "2021-08-08T07:19:09.775Z",
        "username": "dicoding",
        "comments": [{"id", "username", "date", "content", "replies": [...]}]
    }
    """

    id: str
    title: str
    body: str
    date: str
    username: str
    comments: list[CommentDTO]


class GetThreadData(BaseModel):
    thread: DetailThreadDTO


# ==================== ROUTER ====================

router = APIRouter(prefix="/threads", tags=["threads"])


@router.post(
    "",
    response_model=Envelope[AddThreadData],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_thread(
    use_case: FromDishka[AddThreadUseCase],
    payload: Optional[dict[str, Any]] = Body(default=None),
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a new thread owned by the authenticated user."""
    added_thread = await use_case.execute({**(payload or {}), "owner": current_user.id})

    return Envelope[AddThreadData](
        data=AddThreadData(
            addedThread=AddedThreadDTO(
                id=added_thread.id,
                title=added_thread.title,
                owner=added_thread.owner,
            )
        )
    )


@router.get(
    "/{thread_id}",
    response_model=Envelope[GetThreadData],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_thread(
    thread_id: str,
    use_case: FromDishka[GetThreadUseCase],
):
    """Public thread detail with comments and replies, oldest first."""
    detail_thread = await use_case.execute(thread_id)

    return Envelope[GetThreadData](
        data=GetThreadData(thread=DetailThreadDTO.model_validate(asdict(detail_thread)))
    )
