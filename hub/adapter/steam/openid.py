"""Steam OpenID 2.0 login adapter.

Steam speaks plain OpenID 2.0: the browser is sent to Steam with
``checkid_setup`` and comes back with a signed assertion. The relying
party cannot check that signature on its own, so every assertion is
re-posted to Steam with ``check_authentication`` before it is trusted.

OpenID 2.0 has no state parameter. The check_authentication round-trip
is the only forgery protection on this flow.
"""

import re
from collections.abc import Mapping
from urllib.parse import urlencode

import httpx
import logfire

from hub.adapter.steam.catalog import fetch_owned_games
from hub.config import SteamSettings
from hub.domain.error import (
    ConfigurationMissingError,
    InvalidModeError,
    MissingIdentityError,
    NoProfileDataError,
    UpstreamUnavailableError,
    VerificationFailedError,
)
from hub.domain.model import Game, LinkedAccount, NormalizedIdentity
from hub.domain.value import GameProvider

OPENID_NS = "http://specs.openid.net/auth/2.0"
IDENTIFIER_SELECT = "http://specs.openid.net/auth/2.0/identifier_select"
CLAIMED_ID_PATTERN = re.compile(r"/id/(\d+)$")


def extract_steam_id(claimed_id: str | None) -> str:
    """Pull the Steam64 ID out of an OpenID claimed_id URL.

    Args:
        claimed_id: e.g. https://steamcommunity.com/openid/id/76561197960435530

    Returns:
        The numeric Steam ID

    Raises:
        MissingIdentityError: If the URL does not end in /id/<digits>
    """
    match = CLAIMED_ID_PATTERN.search(claimed_id or "")
    if not match:
        raise MissingIdentityError(f"No Steam ID found in claimed_id: {claimed_id!r}")
    return match.group(1)


class SteamOpenIDAdapter:
    """Steam login and catalog adapter."""

    provider = GameProvider.STEAM
    uses_state = False

    def __init__(
        self,
        settings: SteamSettings,
        realm: str,
        return_to: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Steam adapter.

        Args:
            settings: Steam settings (endpoints, API key)
            realm: This service's base URL
            return_to: This service's Steam callback URL
            transport: Optional httpx transport (tests inject a fake)
        """
        self.settings = settings
        self.realm = realm
        self.return_to = return_to
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, timeout=self.settings.timeout)

    async def begin_login(self, state: str | None = None) -> str:
        """Build the OpenID checkid_setup redirect.

        Args:
            state: Ignored, OpenID 2.0 has nowhere to carry it

        Returns:
            Steam login URL
        """
        _ = state
        params = {
            "openid.ns": OPENID_NS,
            "openid.mode": "checkid_setup",
            "openid.return_to": self.return_to,
            "openid.realm": self.realm,
            "openid.identity": IDENTIFIER_SELECT,
            "openid.claimed_id": IDENTIFIER_SELECT,
        }
        return f"{self.settings.openid_url}?{urlencode(params)}"

    async def handle_callback(
        self, params: Mapping[str, str], stored_state: str | None = None
    ) -> NormalizedIdentity:
        """Verify a Steam OpenID assertion.

        Args:
            params: openid.* query parameters from the callback
            stored_state: Unused by Steam

        Returns:
            Steam identity without tokens

        Raises:
            MissingIdentityError: claimed_id absent or malformed
            InvalidModeError: mode is not id_res
            VerificationFailedError: Steam did not confirm the assertion
            ConfigurationMissingError: No Steam Web API key
            NoProfileDataError: Steam returned no player summary
            UpstreamUnavailableError: Steam could not be reached
        """
        _ = stored_state
        steam_id = extract_steam_id(params.get("openid.claimed_id"))

        mode = params.get("openid.mode")
        if mode != "id_res":
            raise InvalidModeError(f"Invalid OpenID mode: {mode!r}")

        with logfire.span("steam.handle_callback", steam_id=steam_id):
            await self._check_authentication(params)

            if not self.settings.api_key:
                raise ConfigurationMissingError(
                    "Steam Web API key is not configured", code="steam_not_configured"
                )

            player = await self._get_player_summary(steam_id)
            if not player:
                raise NoProfileDataError(f"No player data for Steam ID {steam_id}")

            provider_id = str(player.get("steamid") or steam_id)
            logfire.info("Steam OpenID completed", steam_id=provider_id)

            return NormalizedIdentity(
                provider=GameProvider.STEAM,
                provider_id=provider_id,
                display_name=player.get("personaname"),
                avatar_url=player.get("avatarfull"),
                email=f"{provider_id}@steamcommunity.com",
            )

    async def _check_authentication(self, params: Mapping[str, str]) -> None:
        """Ask Steam to confirm it really issued this assertion."""
        verify_params = dict(params)
        verify_params["openid.mode"] = "check_authentication"

        try:
            async with self._client() as client:
                response = await client.post(
                    self.settings.openid_url,
                    data=verify_params,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.HTTPError as e:
            logfire.error("Steam verification HTTP error", error=str(e))
            raise UpstreamUnavailableError(f"HTTP error verifying Steam assertion: {e}")

        if "is_valid:true" not in response.text:
            logfire.warn(
                "Steam verification failed", status_code=response.status_code
            )
            raise VerificationFailedError("Steam did not confirm the OpenID assertion")

    async def _get_player_summary(self, steam_id: str) -> dict | None:
        """Look up display name and avatar for a Steam ID."""
        try:
            async with self._client() as client:
                response = await client.get(
                    f"{self.settings.api_url}/ISteamUser/GetPlayerSummaries/v0002/",
                    params={"key": self.settings.api_key, "steamids": steam_id},
                )
        except httpx.HTTPError as e:
            logfire.error("Steam player summary HTTP error", error=str(e))
            raise UpstreamUnavailableError(f"HTTP error fetching Steam profile: {e}")

        if response.status_code != 200:
            logfire.error(
                "Steam player summary request failed",
                status_code=response.status_code,
            )
            return None

        try:
            players = response.json().get("response", {}).get("players") or []
        except ValueError:
            return None
        return players[0] if players else None

    async def fetch_catalog(self, account: LinkedAccount) -> list[Game]:
        """List games owned by a Steam account.

        Raises:
            ConfigurationMissingError: No Steam Web API key
            UpstreamUnavailableError: Owned games request failed
        """
        if not self.settings.api_key:
            raise ConfigurationMissingError(
                "Steam Web API key is not configured", code="steam_not_configured"
            )

        async with self._client() as client:
            return await fetch_owned_games(client, self.settings, account.provider_id)
