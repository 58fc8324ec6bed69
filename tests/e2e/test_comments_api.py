"""End-to-end tests for comment endpoints."""

from uuid import uuid4


class TestCommentEndpoints:
    """Comment lifecycle over HTTP."""

    def test_create_comment_on_poll(self, client, make_user, make_poll):
        """Should return 201 with the comment and empty votes."""
        poll = make_poll()
        user_id, headers = make_user()

        response = client.post(
            "/api/comments",
            json={"pollId": poll["id"], "content": "Python all the way"},
            headers=headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["poll_id"] == poll["id"]
        assert body["user_id"] == user_id
        assert body["content"] == "Python all the way"
        assert body["votes"] == {"upvotes": 0, "downvotes": 0, "user_vote": None}

    def test_create_comment_requires_auth(self, client, make_poll):
        """Should return 401 without a session."""
        poll = make_poll()

        response = client.post(
            "/api/comments", json={"pollId": poll["id"], "content": "Hi"}
        )

        assert response.status_code == 401

    def test_create_comment_validation(self, client, make_user, make_poll):
        """Missing, blank and oversized content are all 400."""
        poll = make_poll()
        _, headers = make_user()

        missing = client.post(
            "/api/comments", json={"pollId": poll["id"]}, headers=headers
        )
        blank = client.post(
            "/api/comments", json={"pollId": poll["id"], "content": "  "}, headers=headers
        )
        too_long = client.post(
            "/api/comments",
            json={"pollId": poll["id"], "content": "x" * 1001},
            headers=headers,
        )

        assert missing.status_code == 400
        assert blank.status_code == 400
        assert too_long.status_code == 400

    def test_comment_on_missing_or_closed_poll(self, client, make_user, make_poll):
        """Unknown polls are 404, inactive polls are 403."""
        _, owner = make_user()
        poll = make_poll(owner)
        client.patch(f"/api/polls/{poll['id']}", json={"is_active": False}, headers=owner)

        missing = client.post(
            "/api/comments",
            json={"pollId": str(uuid4()), "content": "Hello"},
            headers=owner,
        )
        closed = client.post(
            "/api/comments",
            json={"pollId": poll["id"], "content": "Hello"},
            headers=owner,
        )

        assert missing.status_code == 404
        assert closed.status_code == 403

    def test_list_comments(self, client, make_user, make_poll):
        """Poll listings, board listings and recent listings."""
        poll = make_poll()
        _, headers = make_user()
        client.post(
            "/api/comments",
            json={"pollId": poll["id"], "content": "On the poll"},
            headers=headers,
        )
        client.post(
            "/api/comments",
            json={"pollId": "community-discussion", "content": "On the board"},
            headers=headers,
        )

        on_poll = client.get("/api/comments", params={"pollId": poll["id"]})
        on_board = client.get(
            "/api/comments", params={"pollId": "community-discussion"}
        )
        recent = client.get("/api/comments", params={"recent": "true"})

        assert [c["content"] for c in on_poll.json()["comments"]] == ["On the poll"]
        assert [c["content"] for c in on_board.json()["comments"]] == ["On the board"]
        assert len(recent.json()["comments"]) == 2

    def test_list_comments_without_filter(self, client):
        """Listing without pollId or recent is 400."""
        assert client.get("/api/comments").status_code == 400
        assert client.get("/api/comments", params={"pollId": "bad"}).status_code == 400

    def test_reply_updates_parent(self, client, make_user, make_poll):
        """Replies bump the parent's reply count."""
        poll = make_poll()
        _, headers = make_user()
        parent = client.post(
            "/api/comments",
            json={"pollId": poll["id"], "content": "Question"},
            headers=headers,
        ).json()

        reply = client.post(
            "/api/comments",
            json={"pollId": poll["id"], "content": "Answer", "parentId": parent["id"]},
            headers=headers,
        )

        assert reply.status_code == 201
        assert reply.json()["parent_id"] == parent["id"]
        assert client.get(f"/api/comments/{parent['id']}").json()["reply_count"] == 1


class TestCommentMutationGuard:
    """Edit and delete rules over HTTP."""

    def _comment(self, client, headers) -> dict:
        return client.post(
            "/api/comments",
            json={"pollId": "community-discussion", "content": "Original"},
            headers=headers,
        ).json()

    def test_author_edits(self, client, make_user):
        """The author can edit; the comment is marked edited."""
        _, headers = make_user()
        comment = self._comment(client, headers)

        response = client.put(
            f"/api/comments/{comment['id']}", json={"content": "Edited"}, headers=headers
        )

        assert response.status_code == 200
        assert response.json()["content"] == "Edited"
        assert response.json()["is_edited"] is True

    def test_non_author_edit_is_forbidden(self, client, make_user, make_admin):
        """Nobody but the author may edit, admins included."""
        _, author = make_user()
        comment = self._comment(client, author)
        _, admin = make_admin()

        response = client.put(
            f"/api/comments/{comment['id']}", json={"content": "Mine"}, headers=admin
        )

        assert response.status_code == 403

    def test_delete_then_edit_and_delete_again(self, client, make_user):
        """Deleted comments are 404 to delete again, 400 to edit, never 500."""
        _, headers = make_user()
        comment = self._comment(client, headers)

        deleted = client.delete(f"/api/comments/{comment['id']}", headers=headers)
        again = client.delete(f"/api/comments/{comment['id']}", headers=headers)
        edit = client.put(
            f"/api/comments/{comment['id']}", json={"content": "Back"}, headers=headers
        )
        read = client.get(f"/api/comments/{comment['id']}")

        assert deleted.status_code == 200
        assert deleted.json() == {"success": True}
        assert again.status_code == 404
        assert edit.status_code == 400
        assert read.status_code == 404

    def test_plain_user_cannot_delete_others(self, client, make_user):
        """Should return 403 for a plain non-author."""
        _, author = make_user()
        comment = self._comment(client, author)
        _, stranger = make_user()

        response = client.delete(f"/api/comments/{comment['id']}", headers=stranger)

        assert response.status_code == 403

    def test_admin_can_delete_others(self, client, make_user, make_admin):
        """Admins may remove any comment."""
        _, author = make_user()
        comment = self._comment(client, author)
        _, admin = make_admin()

        response = client.delete(f"/api/comments/{comment['id']}", headers=admin)

        assert response.status_code == 200


class TestCommentVoteEndpoint:
    """Comment vote toggling over HTTP."""

    def test_toggle_sequence(self, client, make_user):
        """+1 creates, +1 again removes, then -1 creates."""
        _, author = make_user()
        comment = client.post(
            "/api/comments",
            json={"pollId": "community-discussion", "content": "Vote me"},
            headers=author,
        ).json()
        _, voter = make_user()
        url = f"/api/comments/{comment['id']}/vote"

        up = client.post(url, json={"voteType": 1}, headers=voter)
        removed = client.post(url, json={"voteType": 1}, headers=voter)
        down = client.post(url, json={"voteType": -1}, headers=voter)

        assert up.json()["action"] == "created"
        assert up.json()["votes"] == {"upvotes": 1, "downvotes": 0, "user_vote": 1}
        assert removed.json()["action"] == "removed"
        assert removed.json()["votes"]["upvotes"] == 0
        assert down.json()["action"] == "created"
        assert down.json()["votes"] == {"upvotes": 0, "downvotes": 1, "user_vote": -1}

    def test_flip_is_update(self, client, make_user):
        """Switching direction reports an update."""
        _, headers = make_user()
        comment = client.post(
            "/api/comments",
            json={"pollId": "community-discussion", "content": "Flip me"},
            headers=headers,
        ).json()
        url = f"/api/comments/{comment['id']}/vote"

        client.post(url, json={"voteType": 1}, headers=headers)
        flipped = client.post(url, json={"voteType": -1}, headers=headers)

        assert flipped.json()["action"] == "updated"
        assert flipped.json()["votes"]["downvotes"] == 1
        assert flipped.json()["votes"]["upvotes"] == 0

    def test_vote_validation(self, client, make_user):
        """Bad vote types are 400, unknown comments 404, anonymous 401."""
        _, headers = make_user()
        comment = client.post(
            "/api/comments",
            json={"pollId": "community-discussion", "content": "Hi"},
            headers=headers,
        ).json()
        url = f"/api/comments/{comment['id']}/vote"

        assert client.post(url, json={"voteType": 2}, headers=headers).status_code == 400
        assert client.post(url, json={"voteType": "up"}, headers=headers).status_code == 400
        assert client.post(url, json={}, headers=headers).status_code == 400
        assert (
            client.post(
                f"/api/comments/{uuid4()}/vote", json={"voteType": 1}, headers=headers
            ).status_code
            == 404
        )
        assert client.post(url, json={"voteType": 1}).status_code == 401

    def test_whole_number_vote_types(self, client, make_user):
        """1.0 and -1.0 count as 1 and -1; fractions and booleans do not."""
        _, headers = make_user()
        comment = client.post(
            "/api/comments",
            json={"pollId": "community-discussion", "content": "Floats"},
            headers=headers,
        ).json()
        url = f"/api/comments/{comment['id']}/vote"

        up = client.post(url, json={"voteType": 1.0}, headers=headers)
        down = client.post(url, json={"voteType": -1.0}, headers=headers)
        fraction = client.post(url, json={"voteType": 0.5}, headers=headers)
        boolean = client.post(url, json={"voteType": True}, headers=headers)

        assert up.status_code == 200
        assert up.json()["action"] == "created"
        assert down.json()["action"] == "updated"
        assert down.json()["votes"]["user_vote"] == -1
        assert fraction.status_code == 400
        assert boolean.status_code == 400
