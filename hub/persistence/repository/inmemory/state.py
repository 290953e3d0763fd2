"""In-memory state token store for testing."""

from hub.domain.repository import StateStore
from hub.domain.value import GameProvider


class InMemoryStateStore(StateStore):
    """In-memory implementation of StateStore for testing."""

    def __init__(self) -> None:
        self._tokens: dict[GameProvider, str] = {}

    async def put(self, provider: GameProvider, token: str) -> None:
        """Store state token."""
        self._tokens[provider] = token

    async def take(self, provider: GameProvider) -> str | None:
        """Pop state token."""
        return self._tokens.pop(provider, None)
