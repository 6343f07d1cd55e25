"""
In-memory repository implementations.

They mirror the Prisma repositories: same ids, same not-found/forbidden
conditions, soft delete by flag.
"""

from typing import Optional

from forum_api.domain.entities.comment import AddComment, AddedComment, Comment
from forum_api.domain.entities.reply import AddReply, AddedReply, Reply
from forum_api.domain.entities.thread import AddThread, AddedThread, Thread
from forum_api.domain.entities.user import RegisterUser, RegisteredUser, User
from forum_api.domain.exceptions import (
    AccessDeniedError,
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from forum_api.domain.ports.repositories import (
    AuthenticationRepository,
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)
from forum_api.infrastructure.persistence.memory.database import (
    InMemoryDatabase,
    Row,
    generate_id,
    utcnow,
)


class InMemoryUserRepository(UserRepository):
    def __init__(self, database: InMemoryDatabase):
        self._db = database

    async def add_user(self, register_user: RegisterUser) -> RegisteredUser:
        row = {
            "id": generate_id("user"),
            "username": register_user.username,
            "password": register_user.password,
            "fullname": register_user.fullname,
        }
        self._db.users.append(row)
        return RegisteredUser(
            id=row["id"], username=row["username"], fullname=row["fullname"]
        )

    async def verify_username_available(self, username: str) -> None:
        if self._db.find(self._db.users, username=username):
            raise ConflictError(f"Username {username} is not available")

    async def get_user_by_username(self, username: str) -> Optional[User]:
        row = self._db.find(self._db.users, username=username)
        return User(**row) if row else None


class InMemoryAuthenticationRepository(AuthenticationRepository):
    def __init__(self, database: InMemoryDatabase):
        self._db = database

    async def add_token(self, token: str) -> None:
        self._db.authentications.append(token)

    async def verify_token_exists(self, token: str) -> None:
        if token not in self._db.authentications:
            raise DomainValidationError("REFRESH_TOKEN.NOT_FOUND")

    async def delete_token(self, token: str) -> None:
        if token in self._db.authentications:
            self._db.authentications.remove(token)


class InMemoryThreadRepository(ThreadRepository):
    def __init__(self, database: InMemoryDatabase):
        self._db = database

    async def add_thread(self, add_thread: AddThread) -> AddedThread:
        row = {
            "id": generate_id("thread"),
            "title": add_thread.title,
            "body": add_thread.body,
            "owner": add_thread.owner,
            "date": utcnow(),
        }
        self._db.threads.append(row)
        return AddedThread(id=row["id"], title=row["title"], owner=row["owner"])

    async def get_thread_by_id(self, thread_id: str) -> Thread:
        row = self._db.find(self._db.threads, id=thread_id)
        if not row:
            raise EntityNotFoundError(f"Thread {thread_id} not found")
        return Thread(**row, username=self._db.username_of(row["owner"]))

    async def verify_thread_exists(self, thread_id: str) -> None:
        if not self._db.find(self._db.threads, id=thread_id):
            raise EntityNotFoundError(f"Thread {thread_id} not found")


class InMemoryCommentRepository(CommentRepository):
    def __init__(self, database: InMemoryDatabase):
        self._db = database

    def _get_row(self, comment_id: str) -> Row:
        row = self._db.find(self._db.comments, id=comment_id)
        if not row:
            raise EntityNotFoundError(f"Comment {comment_id} not found")
        return row

    async def add_comment(self, add_comment: AddComment) -> AddedComment:
        row = {
            "id": generate_id("comment"),
            "thread_id": add_comment.thread_id,
            "owner": add_comment.owner,
            "content": add_comment.content,
            "date": utcnow(),
            "is_delete": False,
        }
        self._db.comments.append(row)
        return AddedComment(id=row["id"], content=row["content"], owner=row["owner"])

    async def get_comments_by_thread_id(self, thread_id: str) -> list[Comment]:
        rows = [row for row in self._db.comments if row["thread_id"] == thread_id]
        rows.sort(key=lambda row: row["date"])
        return [
            Comment(**row, username=self._db.username_of(row["owner"]))
            for row in rows
        ]

    async def verify_comment_exists(self, comment_id: str, thread_id: str) -> None:
        if not self._db.find(self._db.comments, id=comment_id, thread_id=thread_id):
            raise EntityNotFoundError(f"Comment {comment_id} not found")

    async def verify_comment_owner(self, comment_id: str, owner: str) -> None:
        if self._get_row(comment_id)["owner"] != owner:
            raise AccessDeniedError("You are not the owner of this comment")

    async def delete_comment(self, comment_id: str) -> None:
        self._get_row(comment_id)["is_delete"] = True


class InMemoryReplyRepository(ReplyRepository):
    def __init__(self, database: InMemoryDatabase):
        self._db = database

    def _get_row(self, reply_id: str) -> Row:
        row = self._db.find(self._db.replies, id=reply_id)
        if not row:
            raise EntityNotFoundError(f"Reply {reply_id} not found")
        return row

    async def add_reply(self, add_reply: AddReply) -> AddedReply:
        row = {
            "id": generate_id("reply"),
            "comment_id": add_reply.comment_id,
            "owner": add_reply.owner,
            "content": add_reply.content,
            "date": utcnow(),
            "is_delete": False,
        }
        self._db.replies.append(row)
        return AddedReply(id=row["id"], content=row["content"], owner=row["owner"])

    async def get_replies_by_thread_id(self, thread_id: str) -> list[Reply]:
        comment_ids = {
            row["id"] for row in self._db.comments if row["thread_id"] == thread_id
        }
        rows = [row for row in self._db.replies if row["comment_id"] in comment_ids]
        rows.sort(key=lambda row: row["date"])
        return [
            Reply(**row, username=self._db.username_of(row["owner"])) for row in rows
        ]

    async def verify_reply_exists(self, reply_id: str, comment_id: str) -> None:
        if not self._db.find(self._db.replies, id=reply_id, comment_id=comment_id):
            raise EntityNotFoundError(f"Reply {reply_id} not found")

    async def verify_reply_owner(self, reply_id: str, owner: str) -> None:
        if self._get_row(reply_id)["owner"] != owner:
            raise AccessDeniedError("You are not the owner of this reply")

    async def delete_reply(self, reply_id: str) -> None:
        self._get_row(reply_id)["is_delete"] = True
