"""
API Routers - FastAPI endpoint definitions.
"""

from forum_api.presentation.api.users import router as users_router
from forum_api.presentation.api.authentications import router as authentications_router
from forum_api.presentation.api.threads import router as threads_router
from forum_api.presentation.api.comments import router as comments_router
from forum_api.presentation.api.replies import router as replies_router

__all__ = [
    "users_router",
    "authentications_router",
    "threads_router",
    "comments_router",
    "replies_router",
]
