"""
Unit tests for registration and authentication use cases.

Run with: pytest tests/test_user_use_cases.py -v
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from forum_api.application.commands.authentications import (
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshAuthenticationUseCase,
)
from forum_api.application.commands.users import AddUserUseCase
from forum_api.domain.entities import NewAuth, RegisterUser, RegisteredUser, User
from forum_api.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainValidationError,
    MissingPropertyError,
)
from forum_api.domain.ports.repositories import AuthenticationRepository, UserRepository
from forum_api.domain.ports.security import AuthenticationTokenManager, PasswordHash

REGISTER_PAYLOAD = {
    "username": "dicoding",
    "password": "secret",
    "fullname": "Dicoding Indonesia",
}


@pytest.fixture()
def user_repository():
    return AsyncMock(spec=UserRepository)


@pytest.fixture()
def authentication_repository():
    return AsyncMock(spec=AuthenticationRepository)


@pytest.fixture()
def password_hash():
    mock = AsyncMock(spec=PasswordHash)
    mock.hash.return_value = "encrypted_password"
    return mock


@pytest.fixture()
def token_manager():
    mock = AsyncMock(spec=AuthenticationTokenManager)
    mock.create_access_token.return_value = "access_token"
    mock.create_refresh_token.return_value = "refresh_token"
    return mock


class TestAddUserUseCase:
    def test_registers_with_hashed_password(self, user_repository, password_hash):
        user_repository.add_user.return_value = RegisteredUser(
            id="user-123", username="dicoding", fullname="Dicoding Indonesia"
        )
        use_case = AddUserUseCase(user_repository, password_hash)

        registered = asyncio.run(use_case.execute(REGISTER_PAYLOAD))

        assert registered.id == "user-123"
        user_repository.verify_username_available.assert_awaited_once_with("dicoding")
        password_hash.hash.assert_awaited_once_with("secret")
        user_repository.add_user.assert_awaited_once_with(
            RegisterUser(
                username="dicoding",
                password="encrypted_password",
                fullname="Dicoding Indonesia",
            )
        )

    def test_taken_username_is_conflict(self, user_repository, password_hash):
        user_repository.verify_username_available.side_effect = ConflictError(
            "Username dicoding is not available"
        )
        use_case = AddUserUseCase(user_repository, password_hash)

        with pytest.raises(ConflictError):
            asyncio.run(use_case.execute(REGISTER_PAYLOAD))

        password_hash.hash.assert_not_called()
        user_repository.add_user.assert_not_called()


class TestLoginUserUseCase:
    def _use_case(self, user_repository, authentication_repository, password_hash, token_manager):
        return LoginUserUseCase(
            user_repository=user_repository,
            authentication_repository=authentication_repository,
            password_hash=password_hash,
            token_manager=token_manager,
        )

    def test_issues_and_stores_tokens(
        self, user_repository, authentication_repository, password_hash, token_manager
    ):
        user_repository.get_user_by_username.return_value = User(
            id="user-123",
            username="dicoding",
            password="encrypted_password",
            fullname="Dicoding Indonesia",
        )
        use_case = self._use_case(
            user_repository, authentication_repository, password_hash, token_manager
        )

        new_auth = asyncio.run(
            use_case.execute({"username": "dicoding", "password": "secret"})
        )

        assert new_auth == NewAuth(access_token="access_token", refresh_token="refresh_token")
        password_hash.compare.assert_awaited_once_with("secret", "encrypted_password")
        token_manager.create_access_token.assert_awaited_once_with(
            {"id": "user-123", "username": "dicoding"}
        )
        authentication_repository.add_token.assert_awaited_once_with("refresh_token")

    def test_unknown_username(
        self, user_repository, authentication_repository, password_hash, token_manager
    ):
        user_repository.get_user_by_username.return_value = None
        use_case = self._use_case(
            user_repository, authentication_repository, password_hash, token_manager
        )

        with pytest.raises(AuthenticationError):
            asyncio.run(use_case.execute({"username": "nobody", "password": "secret"}))

        authentication_repository.add_token.assert_not_called()

    def test_wrong_password(
        self, user_repository, authentication_repository, password_hash, token_manager
    ):
        user_repository.get_user_by_username.return_value = User(
            id="user-123", username="dicoding", password="hashed", fullname="D"
        )
        password_hash.compare.side_effect = AuthenticationError()
        use_case = self._use_case(
            user_repository, authentication_repository, password_hash, token_manager
        )

        with pytest.raises(AuthenticationError):
            asyncio.run(use_case.execute({"username": "dicoding", "password": "wrong"}))

        token_manager.create_access_token.assert_not_called()

    def test_missing_password(
        self, user_repository, authentication_repository, password_hash, token_manager
    ):
        use_case = self._use_case(
            user_repository, authentication_repository, password_hash, token_manager
        )

        with pytest.raises(MissingPropertyError):
            asyncio.run(use_case.execute({"username": "dicoding"}))


class TestRefreshAuthenticationUseCase:
    def test_returns_new_access_token(self, authentication_repository, token_manager):
        token_manager.decode_payload.return_value = {
            "id": "user-123",
            "username": "dicoding",
            "iat": 1,
        }
        use_case = RefreshAuthenticationUseCase(authentication_repository, token_manager)

        access_token = asyncio.run(use_case.execute({"refreshToken": "refresh_token"}))

        assert access_token == "access_token"
        token_manager.verify_refresh_token.assert_awaited_once_with("refresh_token")
        authentication_repository.verify_token_exists.assert_awaited_once_with(
            "refresh_token"
        )
        token_manager.create_access_token.assert_awaited_once_with(
            {"id": "user-123", "username": "dicoding"}
        )

    def test_unknown_token(self, authentication_repository, token_manager):
        authentication_repository.verify_token_exists.side_effect = DomainValidationError(
            "REFRESH_TOKEN.NOT_FOUND"
        )
        use_case = RefreshAuthenticationUseCase(authentication_repository, token_manager)

        with pytest.raises(DomainValidationError):
            asyncio.run(use_case.execute({"refreshToken": "refresh_token"}))

        token_manager.create_access_token.assert_not_called()


class TestLogoutUserUseCase:
    def test_deletes_token(self, authentication_repository):
        use_case = LogoutUserUseCase(authentication_repository)

        asyncio.run(use_case.execute({"refreshToken": "refresh_token"}))

        authentication_repository.verify_token_exists.assert_awaited_once_with(
            "refresh_token"
        )
        authentication_repository.delete_token.assert_awaited_once_with("refresh_token")

    def test_missing_token(self, authentication_repository):
        use_case = LogoutUserUseCase(authentication_repository)

        with pytest.raises(MissingPropertyError) as exc_info:
            asyncio.run(use_case.execute({}))

        assert exc_info.value.code == "DELETE_AUTHENTICATION.NOT_CONTAIN_NEEDED_PROPERTY"
        authentication_repository.delete_token.assert_not_called()
