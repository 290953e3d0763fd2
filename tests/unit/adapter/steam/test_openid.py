"""Unit tests for the Steam OpenID adapter."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from hub.adapter.steam import SteamOpenIDAdapter, extract_steam_id
from hub.config import SteamSettings
from hub.domain.error import (
    ConfigurationMissingError,
    InvalidModeError,
    MissingIdentityError,
    NoProfileDataError,
    UpstreamUnavailableError,
    VerificationFailedError,
)
from hub.domain.model import LinkedAccount
from hub.domain.value import GameProvider
from tests.fakes import STEAM_ID, FakeSteam, steam_callback_params

REALM = "http://localhost:8000"
RETURN_TO = "http://localhost:8000/api/steam/callback"


@pytest.fixture
def fake_steam():
    return FakeSteam()


@pytest.fixture
def settings():
    return SteamSettings(api_key="test-key", details_delay_seconds=0)


@pytest.fixture
def adapter(settings, fake_steam):
    return SteamOpenIDAdapter(
        settings=settings,
        realm=REALM,
        return_to=RETURN_TO,
        transport=fake_steam.transport(),
    )


class TestExtractSteamId:
    """Tests for claimed_id parsing."""

    def test_extracts_trailing_digits(self):
        assert extract_steam_id(f"https://steamcommunity.com/openid/id/{STEAM_ID}") == STEAM_ID

    @pytest.mark.parametrize(
        "claimed_id",
        [
            None,
            "",
            "https://steamcommunity.com/openid/id/",
            "https://steamcommunity.com/openid/id/abc",
            "https://steamcommunity.com/openid/id/123/extra",
            "https://steamcommunity.com/profiles/123x",
        ],
    )
    def test_rejects_malformed_claimed_id(self, claimed_id):
        with pytest.raises(MissingIdentityError):
            extract_steam_id(claimed_id)


class TestBeginLogin:
    """Tests for the checkid_setup redirect."""

    @pytest.mark.asyncio
    async def test_builds_checkid_setup_url(self, adapter):
        """Redirect should target Steam with realm and return_to set."""
        url = await adapter.begin_login()

        parsed = urlparse(url)
        params = {k: v[0] for k, v in parse_qs(parsed.query).items()}
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == (
            "https://steamcommunity.com/openid/login"
        )
        assert params["openid.mode"] == "checkid_setup"
        assert params["openid.ns"] == "http://specs.openid.net/auth/2.0"
        assert params["openid.realm"] == REALM
        assert params["openid.return_to"] == RETURN_TO
        assert params["openid.claimed_id"].endswith("identifier_select")
        assert params["openid.identity"].endswith("identifier_select")

    @pytest.mark.asyncio
    async def test_ignores_state(self, adapter):
        """OpenID 2.0 has no state parameter."""
        url = await adapter.begin_login("some-state")

        assert "some-state" not in url
        assert "state=" not in url


class TestHandleCallback:
    """Tests for assertion verification."""

    @pytest.mark.asyncio
    async def test_valid_assertion_yields_steam_identity(self, adapter, fake_steam):
        """A verified assertion should produce a token-less Steam identity."""
        identity = await adapter.handle_callback(steam_callback_params())

        assert identity.provider == GameProvider.STEAM
        assert identity.provider_id == STEAM_ID
        assert identity.display_name == "Gordon"
        assert identity.avatar_url == "https://avatars.steamstatic.com/gordon_full.jpg"
        assert identity.email == f"{STEAM_ID}@steamcommunity.com"
        assert identity.access_token is None
        assert identity.refresh_token is None
        assert len(fake_steam.verification_calls) == 1

    @pytest.mark.asyncio
    async def test_verification_reposts_every_param_with_mode_overridden(
        self, adapter, fake_steam
    ):
        """check_authentication must echo the whole assertion back."""
        params = steam_callback_params()

        await adapter.handle_callback(params)

        form = parse_qs(fake_steam.verification_calls[0].content.decode())
        assert form["openid.mode"] == ["check_authentication"]
        for key, value in params.items():
            if key != "openid.mode":
                assert form[key] == [value]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "claimed_id",
        [None, "https://steamcommunity.com/openid/id/not-a-number"],
    )
    async def test_missing_identity_never_calls_steam(
        self, adapter, fake_steam, claimed_id
    ):
        """Without a usable claimed_id nothing is sent upstream."""
        params = steam_callback_params()
        if claimed_id is None:
            del params["openid.claimed_id"]
        else:
            params["openid.claimed_id"] = claimed_id

        with pytest.raises(MissingIdentityError) as exc_info:
            await adapter.handle_callback(params)

        assert exc_info.value.code == "missing_identity"
        assert fake_steam.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("mode", ["cancel", "setup_needed", "check_authentication"])
    async def test_rejects_mode_other_than_id_res(self, adapter, fake_steam, mode):
        with pytest.raises(InvalidModeError):
            await adapter.handle_callback(steam_callback_params(mode=mode))

        assert fake_steam.requests == []

    @pytest.mark.asyncio
    async def test_forged_assertion_fails_verification(self, adapter):
        """Steam answering is_valid:false rejects the login."""
        with pytest.raises(VerificationFailedError) as exc_info:
            await adapter.handle_callback(steam_callback_params(sig="forged"))

        assert exc_info.value.code == "verification_failed"

    @pytest.mark.asyncio
    async def test_unknown_player_has_no_profile(self, adapter):
        """A verified ID without a player summary is rejected."""
        with pytest.raises(NoProfileDataError):
            await adapter.handle_callback(steam_callback_params(steam_id="123"))

    @pytest.mark.asyncio
    async def test_missing_api_key_after_verification(self, fake_steam):
        """Profile lookup needs the Web API key."""
        adapter = SteamOpenIDAdapter(
            settings=SteamSettings(api_key=None),
            realm=REALM,
            return_to=RETURN_TO,
            transport=fake_steam.transport(),
        )

        with pytest.raises(ConfigurationMissingError) as exc_info:
            await adapter.handle_callback(steam_callback_params())

        assert exc_info.value.code == "steam_not_configured"

    @pytest.mark.asyncio
    async def test_network_failure_is_upstream_unavailable(self, settings):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter = SteamOpenIDAdapter(
            settings=settings,
            realm=REALM,
            return_to=RETURN_TO,
            transport=httpx.MockTransport(refuse),
        )

        with pytest.raises(UpstreamUnavailableError):
            await adapter.handle_callback(steam_callback_params())


class TestFetchCatalog:
    """Tests for the Steam catalog entry point."""

    @pytest.mark.asyncio
    async def test_lists_owned_games(self, adapter):
        account = LinkedAccount(
            provider=GameProvider.STEAM, provider_id=STEAM_ID, name="Gordon"
        )

        games = await adapter.fetch_catalog(account)

        assert [g.name for g in games] == ["Portal", "Half-Life"]

    @pytest.mark.asyncio
    async def test_requires_api_key(self, fake_steam):
        adapter = SteamOpenIDAdapter(
            settings=SteamSettings(),
            realm=REALM,
            return_to=RETURN_TO,
            transport=fake_steam.transport(),
        )
        account = LinkedAccount(
            provider=GameProvider.STEAM, provider_id=STEAM_ID, name="Gordon"
        )

        with pytest.raises(ConfigurationMissingError):
            await adapter.fetch_catalog(account)
