"""
Replies API Router.

POST   /threads/{thread_id}/comments/{comment_id}/replies
DELETE /threads/{thread_id}/comments/{comment_id}/replies/{reply_id}
"""

from typing import Any, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, Depends, status
from pydantic import BaseModel

from forum_api.application.commands.replies import AddReplyUseCase, DeleteReplyUseCase
from forum_api.presentation.api.envelope import Envelope, MessageEnvelope
from forum_api.presentation.dependencies.auth import AuthUser, get_current_user


class AddedReplyDTO(BaseModel):
    id: str
    content: str
    owner: str


class AddReplyData(BaseModel):
    addedReply: AddedReplyDTO


router = APIRouter(
    prefix="/threads/{thread_id}/comments/{comment_id}/replies", tags=["replies"]
)


@router.post(
    "",
    response_model=Envelope[AddReplyData],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_reply(
    thread_id: str,
    comment_id: str,
    use_case: FromDishka[AddReplyUseCase],
    payload: Optional[dict[str, Any]] = Body(default=None),
    current_user: AuthUser = Depends(get_current_user),
):
    added_reply = await use_case.execute(
        {
            **(payload or {}),
            "threadId": thread_id,
            "commentId": comment_id,
            "owner": current_user.id,
        }
    )

    return Envelope[AddReplyData](
        data=AddReplyData(
            addedReply=AddedReplyDTO(
                id=added_reply.id,
                content=added_reply.content,
                owner=added_reply.owner,
            )
        )
    )


@router.delete(
    "/{reply_id}",
    response_model=MessageEnvelope,
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_reply(
    thread_id: str,
    comment_id: str,
    reply_id: str,
    use_case: FromDishka[DeleteReplyUseCase],
    current_user: AuthUser = Depends(get_current_user),
):
    await use_case.execute(
        {
            "threadId": thread_id,
            "commentId": comment_id,
            "replyId": reply_id,
            "owner": current_user.id,
        }
    )
    return MessageEnvelope()
