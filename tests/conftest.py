"""Test configuration and fixtures."""

import logfire
import pytest

from hub.domain.model import LinkedAccount, NormalizedIdentity
from hub.domain.value import GameProvider
from tests.fakes import EPIC_ACCESS_TOKEN, EPIC_ACCOUNT_ID, STEAM_ID

# Keep test output quiet and never ship spans anywhere
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def steam_identity() -> NormalizedIdentity:
    """Verified Steam identity (no tokens)."""
    return NormalizedIdentity(
        provider=GameProvider.STEAM,
        provider_id=STEAM_ID,
        display_name="Gordon",
        avatar_url="https://avatars.steamstatic.com/gordon_full.jpg",
        email=f"{STEAM_ID}@steamcommunity.com",
    )


@pytest.fixture
def epic_identity() -> NormalizedIdentity:
    """Verified Epic identity with tokens."""
    return NormalizedIdentity(
        provider=GameProvider.EPIC,
        provider_id=EPIC_ACCOUNT_ID,
        display_name="EpicPlayer",
        avatar_url="https://cdn.epic.test/avatar.png",
        email="player@epic.test",
        access_token=EPIC_ACCESS_TOKEN,
        refresh_token="epic-refresh-token",
    )


@pytest.fixture
def steam_account(steam_identity) -> LinkedAccount:
    """Ledger record for the Steam identity."""
    return LinkedAccount.from_identity(steam_identity)


@pytest.fixture
def epic_account(epic_identity) -> LinkedAccount:
    """Ledger record for the Epic identity."""
    return LinkedAccount.from_identity(epic_identity)
