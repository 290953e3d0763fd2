"""Steam owned-games catalog.

Owned games come from the Steam Web API. Categories and genres are only
available per app from the store API, so the first ``details_limit``
games are enriched one request at a time with a fixed pause in between.
"""

import asyncio

import httpx
import logfire

from hub.adapter.parsing import as_dict, labels
from hub.config import SteamSettings
from hub.domain.error import UpstreamUnavailableError
from hub.domain.model import Game
from hub.domain.value import GameProvider

HEADER_IMAGE_URL = "https://cdn.cloudflare.steamstatic.com/steam/apps/{appid}/header.jpg"


def _to_game(
    entry: dict,
    categories: list[str] | None = None,
    tags: list[str] | None = None,
) -> Game:
    appid = entry["appid"]
    name = entry.get("name")
    playtime = entry.get("playtime_forever")
    return Game(
        id=f"steam_{appid}",
        name=name if isinstance(name, str) and name else str(appid),
        platform=GameProvider.STEAM.display_name,
        image=HEADER_IMAGE_URL.format(appid=appid),
        playtime_minutes=playtime if isinstance(playtime, int) else None,
        categories=categories or [],
        tags=tags or [],
    )


async def fetch_owned_games(
    client: httpx.AsyncClient, settings: SteamSettings, steam_id: str
) -> list[Game]:
    """Fetch the games a Steam account owns.

    Entries without an ``appid`` are skipped.

    Args:
        client: HTTP client to use for every request
        settings: Steam settings (API key, endpoints, enrichment limits)
        steam_id: Steam64 ID

    Returns:
        Games in the order Steam lists them

    Raises:
        UpstreamUnavailableError: If the owned games request fails
    """
    try:
        response = await client.get(
            f"{settings.api_url}/IPlayerService/GetOwnedGames/v1/",
            params={
                "key": settings.api_key,
                "steamid": steam_id,
                "include_appinfo": "true",
                "include_played_free_games": "true",
            },
        )
        response.raise_for_status()
        entries = as_dict(as_dict(response.json()).get("response")).get("games")
    except (httpx.HTTPError, ValueError) as e:
        raise UpstreamUnavailableError(f"Failed to fetch Steam owned games: {e}")

    if not isinstance(entries, list):
        entries = []
    entries = [e for e in entries if isinstance(e, dict) and e.get("appid") is not None]

    detailed = entries[: settings.details_limit]
    remaining = entries[settings.details_limit :]

    games = []
    for i, entry in enumerate(detailed):
        categories, tags = await _fetch_app_details(client, settings, entry["appid"])
        games.append(_to_game(entry, categories, tags))
        if i < len(detailed) - 1 and settings.details_delay_seconds > 0:
            await asyncio.sleep(settings.details_delay_seconds)

    games.extend(_to_game(entry) for entry in remaining)
    return games


async def _fetch_app_details(
    client: httpx.AsyncClient, settings: SteamSettings, appid: int
) -> tuple[list[str], list[str]]:
    """Look up store categories and genres for one app.

    Returns empty lists when the store has nothing, answers with an
    unexpected shape, or the request fails.
    """
    try:
        response = await client.get(
            f"{settings.store_url}/api/appdetails", params={"appids": appid}
        )
        response.raise_for_status()
        app_data = as_dict(as_dict(as_dict(response.json()).get(str(appid))).get("data"))
        categories = labels(app_data.get("categories"), "description")
        genres = labels(app_data.get("genres"), "description")
    except (httpx.HTTPError, ValueError) as e:
        logfire.debug("Steam app details unavailable", appid=appid, error=str(e))
        return [], []

    return categories, genres
