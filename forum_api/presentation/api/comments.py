"""
Comments API Router.

POST   /threads/{thread_id}/comments
DELETE /threads/{thread_id}/comments/{comment_id}   (soft delete, owner only)
"""

from typing import Any, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel

from forum_api.application.commands.comments import (
    AddCommentUseCase,
    DeleteCommentUseCase,
)
from forum_api.presentation.api.envelope import Envelope, MessageEnvelope
from forum_api.presentation.dependencies.auth import AuthUser, get_current_user


class AddedCommentDTO(BaseModel):
    id: str
    content: str
    owner: str


class AddCommentData(BaseModel):
    addedComment: AddedCommentDTO


router = APIRouter(prefix="/threads/{thread_id}/comments", tags=["comments"])


@router.post(
    "",
    response_model=Envelope[AddCommentData],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_comment(
    thread_id: str,
    use_case: FromDishka[AddCommentUseCase],
    payload: Optional[dict[str, Any]] = Body(default=None),
    current_user: AuthUser = Depends(get_current_user),
):
    added_comment = await use_case.execute(
        {**(payload or {}), "threadId": thread_id, "owner": current_user.id}
    )

    return Envelope[AddCommentData](
        data=AddCommentData(
            addedComment=AddedCommentDTO(
                id=added_comment.id,
                content=added_comment.content,
                owner=added_comment.owner,
            )
        )
    )


@router.delete(
    "/{comment_id}",
    response_model=MessageEnvelope,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_comment(
    thread_id: str,
    comment_id: str,
    use_case: FromDishka[DeleteCommentUseCase],
    current_user: AuthUser = Depends(get_current_user),
):
    await use_case.execute(
        {"threadId": thread_id, "commentId": comment_id, "owner": current_user.id}
    )
    return MessageEnvelope()
