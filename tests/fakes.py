"""Fake Steam and Epic upstreams for tests.

Each fake is an httpx.MockTransport that answers the handful of
endpoints the adapters call, and records every request it sees.
"""

from urllib.parse import parse_qs

import httpx

STEAM_ID = "76561197960435530"
STEAM_CLAIMED_ID = f"https://steamcommunity.com/openid/id/{STEAM_ID}"
STEAM_VALID_SIG = "valid-signature"

EPIC_ACCOUNT_ID = "epic-account-123"
EPIC_GOOD_CODE = "good-code"
EPIC_ACCESS_TOKEN = "epic-access-token"
EPIC_REFRESH_TOKEN = "epic-refresh-token"
EPIC_CLIENT_SECRET = "test-epic-secret"


def steam_callback_params(
    steam_id: str = STEAM_ID, sig: str = STEAM_VALID_SIG, mode: str = "id_res"
) -> dict[str, str]:
    """Query parameters of a Steam OpenID callback."""
    claimed_id = f"https://steamcommunity.com/openid/id/{steam_id}"
    return {
        "openid.ns": "http://specs.openid.net/auth/2.0",
        "openid.mode": mode,
        "openid.op_endpoint": "https://steamcommunity.com/openid/login",
        "openid.claimed_id": claimed_id,
        "openid.identity": claimed_id,
        "openid.return_to": "http://localhost:8000/api/steam/callback",
        "openid.response_nonce": "2026-10-17T12:00:00Zabc",
        "openid.assoc_handle": "1234567890",
        "openid.signed": "signed,op_endpoint,claimed_id,identity,return_to,response_nonce,assoc_handle",
        "openid.sig": sig,
    }


class FakeSteam:
    """Steam community, Web API and store endpoints."""

    def __init__(self, games: list[dict] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.games = (
            games
            if games is not None
            else [
                {"appid": 400, "name": "Portal", "playtime_forever": 120},
                {"appid": 70, "name": "Half-Life", "playtime_forever": 30},
            ]
        )
        self.players = {
            STEAM_ID: {
                "steamid": STEAM_ID,
                "personaname": "Gordon",
                "avatarfull": "https://avatars.steamstatic.com/gordon_full.jpg",
            }
        }

    @property
    def verification_calls(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "POST" and path == "/openid/login":
            form = parse_qs(request.content.decode())
            valid = (
                form.get("openid.mode") == ["check_authentication"]
                and form.get("openid.sig") == [STEAM_VALID_SIG]
            )
            body = "ns:http://specs.openid.net/auth/2.0\n"
            body += "is_valid:true\n" if valid else "is_valid:false\n"
            return httpx.Response(200, text=body)

        if path == "/ISteamUser/GetPlayerSummaries/v0002/":
            player = self.players.get(request.url.params.get("steamids"))
            return httpx.Response(
                200, json={"response": {"players": [player] if player else []}}
            )

        if path == "/IPlayerService/GetOwnedGames/v1/":
            return httpx.Response(
                200,
                json={"response": {"game_count": len(self.games), "games": self.games}},
            )

        if path == "/api/appdetails":
            appid = request.url.params.get("appids")
            return httpx.Response(
                200,
                json={
                    appid: {
                        "success": True,
                        "data": {
                            "categories": [{"id": 2, "description": "Single-player"}],
                            "genres": [{"id": "1", "description": "Action"}],
                        },
                    }
                },
            )

        return httpx.Response(404)


class FakeEpic:
    """Epic token, account and library endpoints."""

    def __init__(self, records: list[dict] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.records = (
            records
            if records is not None
            else [
                {
                    "catalogItemId": "portal-epic",
                    "appName": "portal",
                    "metadata": {
                        "keyImages": [{"url": "https://cdn.epic.test/portal.jpg"}],
                        "categories": ["games"],
                        "genres": ["Puzzle"],
                    },
                },
                {
                    "catalogItemId": "fortnite",
                    "appName": "Fortnite",
                    "metadata": {"keyImages": []},
                },
            ]
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        authorized = (
            request.headers.get("Authorization") == f"Bearer {EPIC_ACCESS_TOKEN}"
        )

        if request.method == "POST" and path == "/oauth/token":
            form = parse_qs(request.content.decode())
            if (
                form.get("grant_type") == ["authorization_code"]
                and form.get("code") == [EPIC_GOOD_CODE]
                and form.get("client_secret") == [EPIC_CLIENT_SECRET]
            ):
                return httpx.Response(
                    200,
                    json={
                        "access_token": EPIC_ACCESS_TOKEN,
                        "refresh_token": EPIC_REFRESH_TOKEN,
                        "token_type": "bearer",
                        "expires_in": 7200,
                    },
                )
            return httpx.Response(400, json={"errorCode": "invalid_grant"})

        if path == "/api/v2/user/account":
            if not authorized:
                return httpx.Response(401)
            return httpx.Response(
                200,
                json={
                    "account_id": EPIC_ACCOUNT_ID,
                    "name": "EpicPlayer",
                    "email": "player@epic.test",
                    "picture": "https://cdn.epic.test/avatar.png",
                },
            )

        if path == "/epic/oauth/v2/library":
            if not authorized:
                return httpx.Response(401)
            return httpx.Response(200, json={"records": self.records})

        return httpx.Response(404)
