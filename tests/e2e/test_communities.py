"""End-to-end tests for community endpoints."""

from uuid import uuid4

import pytest


@pytest.fixture
def community(client, onboard):
    """Community created by ada; returns (community_id, ada_headers)."""
    ada = onboard("ada")
    response = client.post(
        "/communities",
        json={"handle": "python", "name": "Python", "bio": "All things Python"},
        headers=ada,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"], ada


class TestCommunityEndpoints:
    def test_create_and_fetch(self, client, community):
        community_id, _ = community

        details = client.get(f"/communities/{community_id}").json()

        assert details["handle"] == "python"
        assert details["created_by"]["username"] == "ada"
        assert [m["username"] for m in details["members"]] == ["ada"]

    def test_duplicate_handle_conflicts(self, client, community):
        _, ada = community

        response = client.post(
            "/communities", json={"handle": "Python", "name": "Again"}, headers=ada
        )

        assert response.status_code == 409

    def test_missing_community_is_404(self, client):
        assert client.get(f"/communities/{uuid4()}").status_code == 404

    def test_join_and_leave(self, client, onboard, community):
        # Arrange
        community_id, _ = community
        bob = onboard("bob")
        bob_id = client.get("/auth/me", headers=bob).json()["current"]["user"]["id"]

        # Act
        joined = client.post(f"/communities/{community_id}/members", headers=bob)
        again = client.post(f"/communities/{community_id}/members", headers=bob)
        profile = client.get("/users/ext-bob").json()
        left = client.delete(
            f"/communities/{community_id}/members/{bob_id}", headers=bob
        )

        # Assert
        assert joined.status_code == 200
        assert [m["username"] for m in joined.json()["members"]] == ["ada", "bob"]
        assert again.status_code == 409
        assert [c["handle"] for c in profile["communities"]] == ["python"]
        assert left.status_code == 200
        assert [m["username"] for m in left.json()["members"]] == ["ada"]

    def test_only_creator_updates(self, client, onboard, community):
        community_id, ada = community
        bob = onboard("bob")

        forbidden = client.patch(
            f"/communities/{community_id}", json={"name": "Bob's"}, headers=bob
        )
        updated = client.patch(
            f"/communities/{community_id}", json={"name": "Pythonistas"}, headers=ada
        )

        assert forbidden.status_code == 403
        assert updated.status_code == 200
        assert updated.json()["name"] == "Pythonistas"
        assert updated.json()["handle"] == "python"

    def test_community_threads_and_search(self, client, community):
        community_id, ada = community
        client.post(
            "/threads",
            json={"text": "Posted to python", "community_id": community_id},
            headers=ada,
        )
        client.post("/threads", json={"text": "Posted to home"}, headers=ada)

        threads = client.get(f"/communities/{community_id}/threads").json()
        search = client.get("/communities", params={"search_string": "PYT"}).json()

        assert [t["text"] for t in threads["threads"]] == ["Posted to python"]
        assert threads["threads"][0]["community"]["handle"] == "python"
        assert [c["handle"] for c in search["communities"]] == ["python"]
        assert search["communities"][0]["member_count"] == 1

    def test_delete_removes_threads(self, client, onboard, community):
        # Arrange
        community_id, ada = community
        bob = onboard("bob")
        post_id = client.post(
            "/threads",
            json={"text": "Posted to python", "community_id": community_id},
            headers=ada,
        ).json()["thread_id"]

        # Act
        forbidden = client.delete(f"/communities/{community_id}", headers=bob)
        deleted = client.delete(f"/communities/{community_id}", headers=ada)

        # Assert
        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert deleted.json()["deleted_threads"] == 1
        assert client.get(f"/communities/{community_id}").status_code == 404
        assert client.get(f"/threads/{post_id}").status_code == 404
