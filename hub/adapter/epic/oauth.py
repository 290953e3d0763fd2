"""Epic Games OAuth 2.0 adapter.

Implements the authorization code flow: redirect with a state token,
exchange the returned code server-to-server, then read the account
profile with the fresh access token.
"""

from collections.abc import Mapping
from urllib.parse import urlencode

import httpx
import logfire
from pydantic import ValidationError

from hub.adapter.parsing import as_dict, labels
from hub.config import EpicSettings
from hub.domain.error import (
    ConfigurationMissingError,
    InvalidStateError,
    MissingCodeError,
    MissingCredentialError,
    ProfileFetchFailedError,
    ProviderDeniedError,
    TokenExchangeFailedError,
    UpstreamUnavailableError,
)
from hub.domain.model import Game, LinkedAccount, NormalizedIdentity
from hub.domain.service import StateTokenService
from hub.domain.value import GameProvider


class EpicOAuthAdapter:
    """Epic Games login and catalog adapter."""

    provider = GameProvider.EPIC
    uses_state = True

    def __init__(
        self,
        settings: EpicSettings,
        redirect_uri: str,
        state_tokens: StateTokenService,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Epic adapter.

        Args:
            settings: Epic settings (client credentials, endpoints)
            redirect_uri: This service's Epic callback URL
            state_tokens: Verifies the state echoed back on callback
            transport: Optional httpx transport (tests inject a fake)
        """
        self.settings = settings
        self.redirect_uri = redirect_uri
        self.state_tokens = state_tokens
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, timeout=self.settings.timeout)

    def _require_client_id(self) -> str:
        if not self.settings.client_id:
            raise ConfigurationMissingError(
                "Epic Games client ID is not configured", code="epic_not_configured"
            )
        return self.settings.client_id

    async def begin_login(self, state: str | None = None) -> str:
        """Build the authorize redirect.

        Args:
            state: Anti-forgery token the callback must echo back

        Returns:
            Epic authorize URL

        Raises:
            ConfigurationMissingError: No client ID configured
        """
        params = {
            "client_id": self._require_client_id(),
            "response_type": "code",
            "redirect_uri": self.redirect_uri,
        }
        if state:
            params["state"] = state

        logfire.info("Epic OAuth authorization initiated", redirect_uri=self.redirect_uri)
        return f"{self.settings.authorize_url}?{urlencode(params)}"

    async def handle_callback(
        self, params: Mapping[str, str], stored_state: str | None = None
    ) -> NormalizedIdentity:
        """Complete the authorization code flow.

        Args:
            params: Callback query parameters (code, state or error)
            stored_state: State token remembered when the flow began

        Returns:
            Epic identity with access and refresh tokens

        Raises:
            ProviderDeniedError: Epic redirected back with an error
            MissingCodeError: No authorization code
            InvalidStateError: State missing or mismatched
            ConfigurationMissingError: Client credentials not configured
            TokenExchangeFailedError: Code exchange rejected or malformed
            ProfileFetchFailedError: Account lookup failed
        """
        error = params.get("error")
        if error:
            logfire.warn(
                "Epic OAuth error",
                error=error,
                error_description=params.get("error_description"),
            )
            raise ProviderDeniedError(GameProvider.EPIC.value, error)

        code = params.get("code")
        if not code:
            raise MissingCodeError("Missing authorization code")

        if not self.state_tokens.verify(params.get("state"), stored_state):
            raise InvalidStateError("State token does not match")

        client_id = self._require_client_id()
        if not self.settings.client_secret:
            raise ConfigurationMissingError(
                "Epic Games client secret is not configured", code="epic_not_configured"
            )

        with logfire.span("epic.handle_callback"):
            tokens = await self._exchange_code(code, client_id, self.settings.client_secret)
            access_token = tokens["access_token"]
            account = await self._get_account(access_token)

            account_id = account.get("account_id")
            if not account_id:
                raise ProfileFetchFailedError("Epic account response has no account_id")

            logfire.info("Epic OAuth completed", account_id=account_id)

            return NormalizedIdentity(
                provider=GameProvider.EPIC,
                provider_id=str(account_id),
                display_name=account.get("name") or account.get("displayName"),
                avatar_url=account.get("picture"),
                email=account.get("email"),
                access_token=access_token,
                refresh_token=tokens.get("refresh_token"),
            )

    async def _exchange_code(self, code: str, client_id: str, client_secret: str) -> dict:
        """Exchange an authorization code for tokens."""
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": client_id,
            "client_secret": client_secret,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with self._client() as client:
                response = await client.post(
                    self.settings.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.HTTPError as e:
            logfire.error("Epic token exchange HTTP error", error=str(e))
            raise TokenExchangeFailedError(f"HTTP error during token exchange: {e}")

        if not response.is_success:
            logfire.error(
                "Epic token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise TokenExchangeFailedError(
                f"Token exchange failed: {response.status_code}"
            )

        try:
            result = response.json()
        except ValueError:
            raise TokenExchangeFailedError("Token response is not JSON")

        if not isinstance(result, dict) or not result.get("access_token"):
            raise TokenExchangeFailedError("Token response has no access_token")
        return result

    async def _get_account(self, access_token: str) -> dict:
        """Fetch the account behind an access token."""
        try:
            async with self._client() as client:
                response = await client.get(
                    self.settings.account_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logfire.error("Epic account HTTP error", error=str(e))
            raise ProfileFetchFailedError(f"HTTP error fetching Epic account: {e}")

        if not response.is_success:
            logfire.error(
                "Epic account request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProfileFetchFailedError(
                f"Account request failed: {response.status_code}"
            )

        try:
            result = response.json()
        except ValueError:
            raise ProfileFetchFailedError("Account response is not JSON")

        if not isinstance(result, dict):
            raise ProfileFetchFailedError("Account response is not an object")
        return result

    async def fetch_catalog(self, account: LinkedAccount) -> list[Game]:
        """List games in an Epic account's library.

        Raises:
            MissingCredentialError: The account carries no access token
            UpstreamUnavailableError: Library request failed
        """
        if not account.access_token:
            raise MissingCredentialError(
                f"Epic account {account.provider_id} has no access token"
            )

        try:
            async with self._client() as client:
                response = await client.get(
                    self.settings.library_url,
                    headers={"Authorization": f"Bearer {account.access_token}"},
                )
            response.raise_for_status()
            records = as_dict(response.json()).get("records")
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamUnavailableError(f"Failed to fetch Epic library: {e}")

        games = []
        for record in records if isinstance(records, list) else []:
            try:
                game = _record_to_game(as_dict(record))
            except ValidationError as e:
                logfire.warn(
                    "Skipping unreadable Epic library record",
                    catalog_item_id=str(as_dict(record).get("catalogItemId")),
                    error=str(e),
                )
                continue
            if game is not None:
                games.append(game)
        return games


def _record_to_game(record: dict) -> Game | None:
    """Map one library record; None for records without a name.

    Raises:
        ValidationError: If a field has an unusable type
    """
    name = record.get("appName") or record.get("displayName")
    if not name:
        return None

    metadata = as_dict(record.get("metadata"))
    key_images = metadata.get("keyImages")
    first_image = as_dict(key_images[0]) if isinstance(key_images, list) and key_images else {}
    return Game(
        id=f"epic_{record.get('catalogItemId')}",
        name=name,
        platform=GameProvider.EPIC.display_name,
        image=first_image.get("url"),
        categories=labels(metadata.get("categories"), "path"),
        tags=labels(metadata.get("genres"), "path"),
    )
