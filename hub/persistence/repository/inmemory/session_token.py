"""In-memory session token store for testing."""

from hub.domain.repository import SessionTokenStore


class InMemorySessionTokenStore(SessionTokenStore):
    """In-memory implementation of SessionTokenStore for testing."""

    def __init__(self) -> None:
        self._token: str | None = None

    async def get(self) -> str | None:
        return self._token

    async def put(self, token: str) -> None:
        self._token = token

    async def clear(self) -> None:
        self._token = None
