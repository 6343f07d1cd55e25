"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- users, authentications, threads, comments, replies
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from forum_api.config.logging_config import (
    DEFAULT_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from forum_api.config.settings import Config
from forum_api.presentation.api import (
    authentications_router,
    comments_router,
    replies_router,
    threads_router,
    users_router,
)
from forum_api.presentation.errors import register_exception_handlers
from forum_api.setup.ioc.container import create_container

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", DEFAULT_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; built from Config when omitted

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        - Startup: container already created and wired
        - Shutdown: Close DI container (disconnects Prisma, etc.)
        """
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. DI container closed.")

    app = FastAPI(
        title="Forum API",
        description="Threads, comments and replies with token-based authentication",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container, app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(users_router)
    app.include_router(authentications_router)
    app.include_router(threads_router)
    app.include_router(comments_router)
    app.include_router(replies_router)

    return app
