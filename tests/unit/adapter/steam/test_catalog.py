"""Unit tests for the Steam owned-games catalog."""

import httpx
import pytest

from hub.adapter.steam.catalog import fetch_owned_games
from hub.config import SteamSettings
from hub.domain.error import UpstreamUnavailableError
from tests.fakes import STEAM_ID, FakeSteam


@pytest.fixture
def settings():
    return SteamSettings(api_key="test-key", details_delay_seconds=0)


class TestFetchOwnedGames:
    """Tests for owned games and store enrichment."""

    @pytest.mark.asyncio
    async def test_maps_owned_games(self, settings):
        """Games get steam_ ids, the CDN header image and playtime."""
        fake = FakeSteam()

        async with httpx.AsyncClient(transport=fake.transport()) as client:
            games = await fetch_owned_games(client, settings, STEAM_ID)

        portal = games[0]
        assert portal.id == "steam_400"
        assert portal.name == "Portal"
        assert portal.platform == "Steam"
        assert portal.playtime_minutes == 120
        assert portal.image == (
            "https://cdn.cloudflare.steamstatic.com/steam/apps/400/header.jpg"
        )
        assert portal.categories == ["Single-player"]
        assert portal.tags == ["Action"]

    @pytest.mark.asyncio
    async def test_only_first_games_are_enriched(self):
        """Games past details_limit skip the store lookup."""
        fake = FakeSteam(
            games=[{"appid": i, "name": f"Game {i}", "playtime_forever": 0} for i in range(5)]
        )
        settings = SteamSettings(api_key="k", details_limit=2, details_delay_seconds=0)

        async with httpx.AsyncClient(transport=fake.transport()) as client:
            games = await fetch_owned_games(client, settings, STEAM_ID)

        detail_calls = [r for r in fake.requests if r.url.path == "/api/appdetails"]
        assert len(games) == 5
        assert len(detail_calls) == 2
        assert games[1].categories == ["Single-player"]
        assert games[2].categories == []
        assert games[4].tags == []

    @pytest.mark.asyncio
    async def test_failed_details_keep_the_game(self, settings):
        """A store error leaves the game in place without categories."""
        fake = FakeSteam()

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/appdetails":
                return httpx.Response(500)
            return fake.handle(request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            games = await fetch_owned_games(client, settings, STEAM_ID)

        assert [g.name for g in games] == ["Portal", "Half-Life"]
        assert all(g.categories == [] and g.tags == [] for g in games)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "details",
        [
            {"success": True, "data": {"categories": None, "genres": None}},
            {"success": True, "data": {"categories": "Single-player", "genres": [3]}},
            {"success": True, "data": ["not", "an", "object"]},
            {"success": False},
        ],
    )
    async def test_odd_details_keep_the_game(self, settings, details):
        """Unexpected store shapes cost the game its labels, nothing more."""
        fake = FakeSteam()

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/appdetails" and request.url.params["appids"] == "400":
                return httpx.Response(200, json={"400": details})
            return fake.handle(request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            games = await fetch_owned_games(client, settings, STEAM_ID)

        assert [g.name for g in games] == ["Portal", "Half-Life"]
        assert games[0].categories == []
        assert games[0].tags == []
        assert games[1].categories == ["Single-player"]

    @pytest.mark.asyncio
    async def test_labels_keep_usable_items(self, settings):
        fake = FakeSteam(games=[{"appid": 400, "name": "Portal"}])

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/api/appdetails":
                data = {
                    "categories": [{"id": 2, "description": "Single-player"}, {"id": 9}, None],
                    "genres": [{"description": ""}, {"description": "Puzzle"}],
                }
                return httpx.Response(200, json={"400": {"success": True, "data": data}})
            return fake.handle(request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            [portal] = await fetch_owned_games(client, settings, STEAM_ID)

        assert portal.categories == ["Single-player"]
        assert portal.tags == ["Puzzle"]

    @pytest.mark.asyncio
    async def test_entries_without_appid_are_skipped(self, settings):
        fake = FakeSteam(
            games=[
                {"name": "Mystery"},
                "garbage",
                {"appid": 70, "name": "Half-Life", "playtime_forever": "lots"},
            ]
        )

        async with httpx.AsyncClient(transport=fake.transport()) as client:
            games = await fetch_owned_games(client, settings, STEAM_ID)

        assert [g.id for g in games] == ["steam_70"]
        assert games[0].playtime_minutes is None

    @pytest.mark.asyncio
    async def test_private_profile_has_no_games(self, settings):
        """Steam omits the games key for private profiles."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"response": {}})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            games = await fetch_owned_games(client, settings, STEAM_ID)

        assert games == []

    @pytest.mark.asyncio
    async def test_owned_games_error_is_upstream_unavailable(self, settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(UpstreamUnavailableError):
                await fetch_owned_games(client, settings, STEAM_ID)
