"""
HTTP tests for comments and replies under /threads/{thread_id}.

Run with: pytest tests/test_comments_api.py -v
"""

import pytest


@pytest.fixture()
def thread_id(client, auth_headers):
    response = client.post(
        "/threads",
        json={"title": "sebuah thread", "body": "sebuah body thread"},
        headers=auth_headers,
    )
    return response.json()["data"]["addedThread"]["id"]


@pytest.fixture()
def comment_id(client, auth_headers, thread_id):
    response = client.post(
        f"/threads/{thread_id}/comments",
        json={"content": "sebuah comment"},
        headers=auth_headers,
    )
    return response.json()["data"]["addedComment"]["id"]


@pytest.fixture()
def other_headers(login):
    return {"Authorization": f"Bearer {login('johndoe')['accessToken']}"}


class TestComments:
    def test_add_comment(self, client, auth_headers, thread_id):
        response = client.post(
            f"/threads/{thread_id}/comments",
            json={"content": "sebuah comment"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        added_comment = response.json()["data"]["addedComment"]
        assert added_comment["id"].startswith("comment-")
        assert added_comment["content"] == "sebuah comment"
        assert added_comment["owner"].startswith("user-")

    def test_add_comment_missing_content(self, client, auth_headers, thread_id):
        response = client.post(
            f"/threads/{thread_id}/comments", json={}, headers=auth_headers
        )

        assert response.status_code == 400

    def test_add_comment_wrong_type(self, client, auth_headers, thread_id):
        response = client.post(
            f"/threads/{thread_id}/comments", json={"content": 123}, headers=auth_headers
        )

        assert response.status_code == 400

    def test_add_comment_unknown_thread(self, client, auth_headers):
        response = client.post(
            "/threads/thread-999/comments",
            json={"content": "sebuah comment"},
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_add_comment_requires_authentication(self, client, thread_id):
        response = client.post(
            f"/threads/{thread_id}/comments", json={"content": "sebuah comment"}
        )

        assert response.status_code == 401

    def test_delete_comment(self, client, auth_headers, thread_id, comment_id):
        response = client.delete(
            f"/threads/{thread_id}/comments/{comment_id}", headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["status"] == "success"

        detail = client.get(f"/threads/{thread_id}").json()["data"]["thread"]
        assert detail["comments"][0]["content"] == "**komentar telah dihapus**"

    def test_delete_comment_of_someone_else(
        self, client, thread_id, comment_id, other_headers, database
    ):
        response = client.delete(
            f"/threads/{thread_id}/comments/{comment_id}", headers=other_headers
        )

        assert response.status_code == 403
        assert response.json()["status"] == "fail"
        assert database.comments[0]["is_delete"] is False

    def test_delete_unknown_comment(self, client, auth_headers, thread_id):
        response = client.delete(
            f"/threads/{thread_id}/comments/comment-999", headers=auth_headers
        )

        assert response.status_code == 404


class TestReplies:
    def test_add_reply(self, client, thread_id, comment_id, other_headers):
        response = client.post(
            f"/threads/{thread_id}/comments/{comment_id}/replies",
            json={"content": "sebuah balasan"},
            headers=other_headers,
        )

        assert response.status_code == 201
        added_reply = response.json()["data"]["addedReply"]
        assert added_reply["id"].startswith("reply-")
        assert added_reply["content"] == "sebuah balasan"

        detail = client.get(f"/threads/{thread_id}").json()["data"]["thread"]
        replies = detail["comments"][0]["replies"]
        assert [r["id"] for r in replies] == [added_reply["id"]]
        assert replies[0]["username"] == "johndoe"

    def test_add_reply_unknown_comment(self, client, auth_headers, thread_id):
        response = client.post(
            f"/threads/{thread_id}/comments/comment-999/replies",
            json={"content": "sebuah balasan"},
            headers=auth_headers,
        )

        assert response.status_code == 404

    def test_delete_reply(self, client, auth_headers, thread_id, comment_id):
        reply_id = client.post(
            f"/threads/{thread_id}/comments/{comment_id}/replies",
            json={"content": "sebuah balasan"},
            headers=auth_headers,
        ).json()["data"]["addedReply"]["id"]

        response = client.delete(
            f"/threads/{thread_id}/comments/{comment_id}/replies/{reply_id}",
            headers=auth_headers,
        )

        assert response.status_code == 200
        detail = client.get(f"/threads/{thread_id}").json()["data"]["thread"]
        assert detail["comments"][0]["replies"][0]["content"] == "**balasan telah dihapus**"

    def test_delete_reply_of_someone_else(
        self, client, auth_headers, thread_id, comment_id, other_headers
    ):
        reply_id = client.post(
            f"/threads/{thread_id}/comments/{comment_id}/replies",
            json={"content": "sebuah balasan"},
            headers=auth_headers,
        ).json()["data"]["addedReply"]["id"]

        response = client.delete(
            f"/threads/{thread_id}/comments/{comment_id}/replies/{reply_id}",
            headers=other_headers,
        )

        assert response.status_code == 403
