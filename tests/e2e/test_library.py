"""End-to-end tests for session, library and linked account endpoints."""

import pytest
from fastapi.testclient import TestClient

from hub.interface.api.app import create_app
from tests.di import build_test_container
from tests.fakes import EPIC_GOOD_CODE, STEAM_ID, steam_callback_params


@pytest.fixture
def client():
    """Test client with real cookie stores and fake upstreams."""
    app_instance = create_app(build_test_container(unmock={"cookies"}))
    with TestClient(app_instance, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def steam_client(client):
    """Client signed in with Steam."""
    client.get("/api/steam/callback", params=steam_callback_params())
    client.post("/api/steam/session")
    return client


class TestProtectedEndpoints:
    """Endpoints that need a session."""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/api/games"),
            ("get", "/api/linked-accounts"),
            ("delete", f"/api/linked-accounts/steam/{STEAM_ID}"),
        ],
    )
    def test_without_session_is_unauthorized(self, client, method, path):
        response = getattr(client, method)(path)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_forged_session_is_unauthorized(self, client):
        client.cookies.set("session_token", "not-a-token")

        response = client.get("/api/games")

        assert response.status_code == 401

    def test_ledger_alone_is_not_a_session(self, client):
        """A callback links the account but does not sign in."""
        client.get("/api/steam/callback", params=steam_callback_params())

        assert client.get("/api/games").status_code == 401


class TestSession:
    """Session reporting and sign-out."""

    def test_no_session(self, client):
        assert client.get("/api/session").json() == {
            "authenticated": False,
            "identity": None,
            "expiresAt": None,
        }

    def test_sign_out_keeps_ledger(self, steam_client):
        # Act
        response = steam_client.post("/api/session/signout")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert "session_token" not in steam_client.cookies
        assert "linked-accounts" in steam_client.cookies
        assert steam_client.get("/api/session").json()["authenticated"] is False
        assert steam_client.get("/api/games").status_code == 401


class TestLinkedAccounts:
    """Listing and unlinking."""

    def test_list(self, steam_client):
        data = steam_client.get("/api/linked-accounts").json()

        assert data == {
            "accounts": [
                {
                    "provider": "steam",
                    "providerId": STEAM_ID,
                    "name": "Gordon",
                    "image": "https://avatars.steamstatic.com/gordon_full.jpg",
                }
            ]
        }

    def test_unlink_last_account_removes_ledger_cookie(self, steam_client):
        # Act
        response = steam_client.delete(f"/api/linked-accounts/steam/{STEAM_ID}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"accounts": []}
        assert "linked-accounts" not in steam_client.cookies
        # The session survives; games fall back to the session identity
        assert steam_client.get("/api/games").json()["totalCount"] == 2

    def test_unlink_one_of_two(self, steam_client):
        # Arrange
        login = steam_client.get("/api/epic/login")
        state = login.headers["location"].split("state=")[1].split("&")[0]
        steam_client.get(
            "/api/epic/callback", params={"code": EPIC_GOOD_CODE, "state": state}
        )

        # Act
        data = steam_client.delete(f"/api/linked-accounts/steam/{STEAM_ID}").json()

        # Assert
        assert [a["provider"] for a in data["accounts"]] == ["epic"]
        games = steam_client.get("/api/games").json()
        assert [g["platform"] for g in games["games"]] == ["Epic Games", "Epic Games"]

    def test_unlink_unknown_provider(self, steam_client):
        assert steam_client.delete("/api/linked-accounts/origin/1").status_code == 404


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
