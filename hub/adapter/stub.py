"""Catalog-only adapters for GOG, PlayStation and Xbox.

None of these platforms has a login flow wired up yet. They can still
list games for a linked account that already carries a bearer token.
"""

from collections.abc import Callable, Mapping
from typing import Any

import httpx
import logfire
from pydantic import ValidationError

from hub.adapter.parsing import as_dict
from hub.config import StubProviderSettings
from hub.domain.error import (
    MissingCredentialError,
    ProviderNotSupportedError,
    UpstreamUnavailableError,
)
from hub.domain.model import Game, LinkedAccount, NormalizedIdentity
from hub.domain.value import GameProvider

GOG_GAMES_URL = "https://api.gog.com/users/me/games"
PSN_PROFILE_URL = "https://psn.np.community.playstation.net/userProfile/v2/me/profile2"
XBOX_LIBRARY_URL = "https://xboxlive.proxycon.xbox.com/users/me/library"


def _parse_entries(
    entries: Any, provider: GameProvider, to_game: Callable[[dict], Game | None]
) -> list[Game]:
    """Map catalog entries, skipping any that cannot become a game."""
    games = []
    for entry in entries if isinstance(entries, list) else []:
        try:
            game = to_game(as_dict(entry))
        except ValidationError as e:
            logfire.warn(
                "Skipping unreadable catalog entry", provider=provider.value, error=str(e)
            )
            continue
        if game is not None:
            games.append(game)
    return games


def _gog_game(entry: dict) -> Game | None:
    if not entry.get("title"):
        return None
    return Game(
        id=f"gog_{entry.get('id')}",
        name=entry["title"],
        platform=GameProvider.GOG.display_name,
        image=as_dict(entry.get("images")).get("logo"),
    )


def parse_gog_games(body: dict) -> list[Game]:
    return _parse_entries(body.get("games"), GameProvider.GOG, _gog_game)


def parse_psn_profile(body: dict) -> list[Game]:
    # The profile endpoint only proves the token works; trophy titles
    # need a separate API.
    _ = body
    return []


def _xbox_game(entry: dict) -> Game | None:
    if not entry.get("name"):
        return None
    return Game(
        id=f"xbox_{entry.get('titleId')}",
        name=entry["name"],
        platform=GameProvider.XBOX.display_name,
        image=entry.get("displayImage"),
    )


def parse_xbox_library(body: dict) -> list[Game]:
    return _parse_entries(body.get("titles"), GameProvider.XBOX, _xbox_game)


class CatalogOnlyAdapter:
    """Adapter for a platform that can list games but not log in."""

    uses_state = False

    def __init__(
        self,
        provider: GameProvider,
        catalog_url: str,
        parse: Callable[[dict], list[Game]],
        settings: StubProviderSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize catalog-only adapter.

        Args:
            provider: Platform this adapter serves
            catalog_url: Endpoint queried with the account's bearer token
            parse: Turns the endpoint's JSON body into games
            settings: Timeout settings
            transport: Optional httpx transport (tests inject a fake)
        """
        self.provider = provider
        self.catalog_url = catalog_url
        self.parse = parse
        self.settings = settings
        self.transport = transport

    async def begin_login(self, state: str | None = None) -> str:
        _ = state
        raise ProviderNotSupportedError(self.provider.value)

    async def handle_callback(
        self, params: Mapping[str, str], stored_state: str | None = None
    ) -> NormalizedIdentity:
        _ = params, stored_state
        raise ProviderNotSupportedError(self.provider.value)

    async def fetch_catalog(self, account: LinkedAccount) -> list[Game]:
        """Query the platform's catalog endpoint with the account's token.

        Raises:
            MissingCredentialError: The account carries no access token
            UpstreamUnavailableError: The request failed
        """
        if not account.access_token:
            raise MissingCredentialError(
                f"{self.provider.value} account {account.provider_id} has no access token"
            )

        try:
            async with httpx.AsyncClient(
                transport=self.transport, timeout=self.settings.timeout
            ) as client:
                response = await client.get(
                    self.catalog_url,
                    headers={"Authorization": f"Bearer {account.access_token}"},
                )
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamUnavailableError(
                f"Failed to fetch {self.provider.value} catalog: {e}"
            )

        games = self.parse(body if isinstance(body, dict) else {})
        logfire.debug("Stub catalog parsed", provider=self.provider.value, count=len(games))
        return games


def gog_adapter(
    settings: StubProviderSettings, transport: httpx.AsyncBaseTransport | None = None
) -> CatalogOnlyAdapter:
    return CatalogOnlyAdapter(
        GameProvider.GOG, GOG_GAMES_URL, parse_gog_games, settings, transport
    )


def psn_adapter(
    settings: StubProviderSettings, transport: httpx.AsyncBaseTransport | None = None
) -> CatalogOnlyAdapter:
    return CatalogOnlyAdapter(
        GameProvider.PSN, PSN_PROFILE_URL, parse_psn_profile, settings, transport
    )


def xbox_adapter(
    settings: StubProviderSettings, transport: httpx.AsyncBaseTransport | None = None
) -> CatalogOnlyAdapter:
    return CatalogOnlyAdapter(
        GameProvider.XBOX, XBOX_LIBRARY_URL, parse_xbox_library, settings, transport
    )
