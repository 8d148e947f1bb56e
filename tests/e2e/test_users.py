"""End-to-end tests for user endpoints."""

from tests.conftest import auth_headers


class TestUserEndpoints:
    """Onboarding, profiles, search and activity."""

    def test_onboarding_requires_authentication(self, client):
        response = client.put("/users/me", json={"username": "ada", "name": "Ada"})

        assert response.status_code == 401

    def test_onboarding_validates_fields(self, client):
        response = client.put(
            "/users/me",
            json={"username": "ad", "name": "Ada"},
            headers=auth_headers("ext-ada"),
        )

        assert response.status_code == 422

    def test_onboarding_rejects_bad_username_characters(self, client):
        response = client.put(
            "/users/me",
            json={"username": "ada lovelace", "name": "Ada"},
            headers=auth_headers("ext-ada"),
        )

        assert response.status_code == 400

    def test_username_taken(self, client, onboard):
        onboard("ada")

        response = client.put(
            "/users/me",
            json={"username": "ADA", "name": "Other Ada"},
            headers=auth_headers("ext-other"),
        )

        assert response.status_code == 409

    def test_profile_update_and_fetch(self, client, onboard):
        headers = onboard("ada")

        updated = client.put(
            "/users/me",
            json={"username": "Countess", "name": "Ada", "bio": "Analyst"},
            headers=headers,
        )
        profile = client.get("/users/ext-ada")

        assert updated.status_code == 200
        assert profile.status_code == 200
        assert profile.json()["username"] == "countess"
        assert profile.json()["bio"] == "Analyst"

    def test_unknown_user_is_404(self, client):
        assert client.get("/users/ext-nobody").status_code == 404

    def test_search_excludes_current_user(self, client, onboard):
        ada = onboard("ada")
        onboard("alan", name="Alan Turing")
        onboard("grace", name="Grace Hopper")

        everyone = client.get("/users", headers=ada).json()
        hopper = client.get(
            "/users", params={"search_string": "hopper"}, headers=ada
        ).json()

        assert {u["username"] for u in everyone["users"]} == {"alan", "grace"}
        assert [u["username"] for u in hopper["users"]] == ["grace"]

    def test_user_threads(self, client, onboard):
        ada = onboard("ada")
        post_id = client.post(
            "/threads", json={"text": "Ada's thread"}, headers=ada
        ).json()["thread_id"]
        client.post(f"/threads/{post_id}/replies", json={"text": "Own reply"}, headers=ada)

        response = client.get("/users/ext-ada/threads")

        assert response.status_code == 200
        assert [t["thread_id"] for t in response.json()["threads"]] == [post_id]

    def test_activity_shows_replies_from_others(self, client, onboard):
        # Arrange
        ada = onboard("ada")
        bob = onboard("bob")
        post_id = client.post(
            "/threads", json={"text": "Ada's thread"}, headers=ada
        ).json()["thread_id"]
        client.post(f"/threads/{post_id}/replies", json={"text": "Own reply"}, headers=ada)
        client.post(f"/threads/{post_id}/replies", json={"text": "Bob's reply"}, headers=bob)

        # Act
        response = client.get("/users/me/activity", headers=ada)

        # Assert
        assert response.status_code == 200
        activity = response.json()["activity"]
        assert [a["text"] for a in activity] == ["Bob's reply"]
        assert activity[0]["author"]["username"] == "bob"
