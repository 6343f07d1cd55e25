"""
Unit tests for domain entities (payload validation).

Run with: pytest tests/test_entities.py -v
"""

import pytest

from forum_api.domain.entities import (
    AddComment,
    AddReply,
    AddThread,
    DeleteComment,
    DeleteReply,
    RefreshAuthentication,
    RegisterUser,
    UserLogin,
)
from forum_api.domain.exceptions import (
    DomainValidationError,
    InvalidDataTypeError,
    MissingPropertyError,
)


class TestAddComment:
    def test_missing_property(self):
        with pytest.raises(MissingPropertyError) as exc_info:
            AddComment.from_payload({"content": "sebuah comment"})

        assert exc_info.value.code == "ADD_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY"

    def test_wrong_data_type(self):
        payload = {"content": 12345, "threadId": "thread-123", "owner": "user-123"}

        with pytest.raises(InvalidDataTypeError) as exc_info:
            AddComment.from_payload(payload)

        assert exc_info.value.code == "ADD_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION"

    def test_create_correctly(self):
        payload = {"content": "sebuah comment", "threadId": "thread-123", "owner": "user-123"}

        add_comment = AddComment.from_payload(payload)

        assert add_comment.content == payload["content"]
        assert add_comment.thread_id == payload["threadId"]
        assert add_comment.owner == payload["owner"]


class TestAddThread:
    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "sebuah thread", "owner": "user-123"},
            {"body": "sebuah body", "owner": "user-123"},
            {"title": "sebuah thread", "body": "sebuah body"},
            {"title": "sebuah thread", "body": None, "owner": "user-123"},
            {"title": "", "body": "sebuah body", "owner": "user-123"},
            {},
        ],
    )
    def test_missing_property(self, payload):
        with pytest.raises(MissingPropertyError):
            AddThread.from_payload(payload)

    def test_payload_not_a_mapping(self):
        with pytest.raises(MissingPropertyError):
            AddThread.from_payload(["title", "body", "owner"])

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "sebuah thread", "body": 12345, "owner": "user-123"},
            {"title": ["a"], "body": "sebuah body", "owner": "user-123"},
            {"title": "sebuah thread", "body": "sebuah body", "owner": True},
        ],
    )
    def test_wrong_data_type(self, payload):
        with pytest.raises(InvalidDataTypeError):
            AddThread.from_payload(payload)

    def test_missing_reported_before_type(self):
        """A payload that is both incomplete and mistyped reports the missing field."""
        with pytest.raises(MissingPropertyError):
            AddThread.from_payload({"title": 123, "owner": "user-123"})

    def test_values_are_not_normalized(self):
        payload = {"title": "  Spaced Title ", "body": "Body\n", "owner": "user-123"}

        add_thread = AddThread.from_payload(payload)

        assert add_thread.title == "  Spaced Title "
        assert add_thread.body == "Body\n"

    def test_extra_fields_are_ignored(self):
        add_thread = AddThread.from_payload(
            {"title": "t", "body": "b", "owner": "user-123", "extra": 1}
        )

        assert not hasattr(add_thread, "extra")


class TestAddReply:
    def test_missing_comment_id(self):
        with pytest.raises(MissingPropertyError) as exc_info:
            AddReply.from_payload(
                {"content": "balasan", "threadId": "thread-123", "owner": "user-123"}
            )

        assert exc_info.value.code == "ADD_REPLY.NOT_CONTAIN_NEEDED_PROPERTY"

    def test_create_correctly(self):
        add_reply = AddReply.from_payload(
            {
                "content": "balasan",
                "threadId": "thread-123",
                "commentId": "comment-123",
                "owner": "user-123",
            }
        )

        assert add_reply.comment_id == "comment-123"
        assert add_reply.thread_id == "thread-123"


class TestDeleteCommands:
    def test_delete_comment_wrong_type(self):
        with pytest.raises(InvalidDataTypeError) as exc_info:
            DeleteComment.from_payload(
                {"threadId": "thread-123", "commentId": 123, "owner": "user-123"}
            )

        assert exc_info.value.code == "DELETE_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION"

    def test_delete_reply_missing(self):
        with pytest.raises(MissingPropertyError):
            DeleteReply.from_payload(
                {"threadId": "thread-123", "commentId": "comment-123", "owner": "user-123"}
            )


class TestRegisterUser:
    def test_missing_property(self):
        with pytest.raises(MissingPropertyError) as exc_info:
            RegisterUser.from_payload({"username": "dicoding", "password": "secret"})

        assert exc_info.value.code == "REGISTER_USER.NOT_CONTAIN_NEEDED_PROPERTY"

    def test_username_too_long(self):
        with pytest.raises(DomainValidationError) as exc_info:
            RegisterUser.from_payload(
                {"username": "a" * 51, "password": "secret", "fullname": "Dicoding"}
            )

        assert exc_info.value.code == "REGISTER_USER.USERNAME_LIMIT_CHAR"

    def test_username_restricted_character(self):
        with pytest.raises(DomainValidationError) as exc_info:
            RegisterUser.from_payload(
                {"username": "dico ding", "password": "secret", "fullname": "Dicoding"}
            )

        assert exc_info.value.code == "REGISTER_USER.USERNAME_CONTAIN_RESTRICTED_CHARACTER"

    def test_create_correctly(self):
        register_user = RegisterUser.from_payload(
            {"username": "dicoding_2", "password": "secret", "fullname": "Dicoding Indonesia"}
        )

        assert register_user.username == "dicoding_2"
        assert register_user.fullname == "Dicoding Indonesia"


def test_user_login_wrong_type():
    with pytest.raises(InvalidDataTypeError):
        UserLogin.from_payload({"username": "dicoding", "password": 123})


def test_refresh_authentication_maps_camel_case_key():
    command = RefreshAuthentication.from_payload({"refreshToken": "token"})

    assert command.refresh_token == "token"


def test_entities_are_immutable():
    add_comment = AddComment.from_payload(
        {"content": "c", "threadId": "thread-123", "owner": "user-123"}
    )

    with pytest.raises(AttributeError):
        add_comment.content = "changed"
