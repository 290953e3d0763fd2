"""In-memory credential channel for testing."""

from hub.domain.model import NormalizedIdentity
from hub.domain.repository import CredentialChannel
from hub.domain.value import GameProvider


class InMemoryCredentialChannel(CredentialChannel):
    """In-memory implementation of CredentialChannel for testing."""

    def __init__(self) -> None:
        self._slots: dict[GameProvider, NormalizedIdentity] = {}

    async def put(self, identity: NormalizedIdentity) -> None:
        """Deposit identity."""
        self._slots[identity.provider] = identity

    async def take(self, provider: GameProvider) -> NormalizedIdentity | None:
        """Pop identity."""
        return self._slots.pop(provider, None)
