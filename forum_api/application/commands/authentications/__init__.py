"""Authentication commands."""

from .login_user import LoginUserUseCase
from .logout_user import LogoutUserUseCase
from .refresh_authentication import RefreshAuthenticationUseCase

__all__ = [
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RefreshAuthenticationUseCase",
]
