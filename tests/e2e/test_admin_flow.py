"""End-to-end tests for the admin console and health check."""

from tests.di import ADMIN_EMAIL, ADMIN_PASSWORD
from tests.e2e.flows import admin_headers, auth_headers, login, signup
from tests.harness import create_client_fixture

client = create_client_fixture()


class TestAdmin:
    def test_admin_login(self, client):
        body = login(client, ADMIN_EMAIL.upper(), ADMIN_PASSWORD)

        assert body["role"] == "admin"

    def test_lists(self, client):
        asha = signup(client, "Asha")
        ravi = signup(client, "Ravi")
        asha_headers = auth_headers(client, asha)
        client.post(
            "/request-skill", json={"email": asha, "skill": "Docker"}, headers=asha_headers
        )
        client.post(
            "/schedule-session",
            json={"scheduler": asha, "peer": ravi, "skill": "Go", "dateTime": "Mon"},
            headers=asha_headers,
        )
        headers = admin_headers(client)

        users = client.get("/admin/users", headers=headers).json()
        requests = client.get("/admin/requests", headers=headers).json()
        sessions = client.get("/admin/sessions", headers=headers).json()

        assert [u["email"] for u in users] == [asha, ravi]
        assert all("passwordHash" not in u for u in users)
        assert [(r["email"], r["skill"], r["status"]) for r in requests] == [
            (asha, "Docker", "Open")
        ]
        assert [(s["scheduler"], s["peer"]) for s in sessions] == [(asha, ravi)]

    def test_update_points(self, client):
        ravi = signup(client, "Ravi")
        headers = admin_headers(client)

        response = client.post(
            "/admin/update-points", json={"email": ravi, "points": 75}, headers=headers
        )
        leaderboard = client.get("/peers/leaderboard", headers=headers).json()

        assert response.json() == {"status": "ok", "points": 75}
        assert leaderboard[0]["skillPoints"] == 75

    def test_negative_points_rejected(self, client):
        ravi = signup(client, "Ravi")

        response = client.post(
            "/admin/update-points",
            json={"email": ravi, "points": -5},
            headers=admin_headers(client),
        )

        assert response.status_code == 400

    def test_delete_user_cascades(self, client):
        asha = signup(client, "Asha")
        ravi = signup(client, "Ravi")
        ravi_headers = auth_headers(client, ravi)
        client.post(
            "/request-skill", json={"email": ravi, "skill": "Go"}, headers=ravi_headers
        )
        client.post(
            "/schedule-session",
            json={"scheduler": ravi, "peer": asha, "skill": "Go", "dateTime": "Mon"},
            headers=ravi_headers,
        )
        headers = admin_headers(client)

        response = client.request(
            "DELETE", "/admin/user", json={"email": ravi.upper()}, headers=headers
        )

        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "requests": 1,
            "sessions": 1,
            "notifications": 0,
        }
        assert [u["email"] for u in client.get("/admin/users", headers=headers).json()] == [
            asha
        ]
        assert client.get("/admin/sessions", headers=headers).json() == []
        assert client.post("/login", json={"email": ravi, "password": "x"}).status_code == 401

    def test_users_are_forbidden(self, client):
        asha = signup(client, "Asha")
        headers = auth_headers(client, asha)

        assert client.get("/admin/users", headers=headers).status_code == 403
        assert (
            client.post(
                "/admin/update-points",
                json={"email": asha, "points": 999},
                headers=headers,
            ).status_code
            == 403
        )
        assert (
            client.request(
                "DELETE", "/admin/user", json={"email": asha}, headers=headers
            ).status_code
            == 403
        )


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["store"] == "ok"
