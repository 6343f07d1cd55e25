"""Dependency injection (dishka) setup."""

from forum_api.setup.ioc.container import (
    AppProvider,
    InMemoryRepositoryProvider,
    create_container,
)

__all__ = [
    "AppProvider",
    "InMemoryRepositoryProvider",
    "create_container",
]
