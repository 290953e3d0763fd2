"""Session token store interface."""

from abc import ABC, abstractmethod


class SessionTokenStore(ABC):
    """Where the browser keeps its signed session token."""

    @abstractmethod
    async def get(self) -> str | None:
        """Get the current session token, if any."""
        pass

    @abstractmethod
    async def put(self, token: str) -> None:
        """Hand a freshly minted session token to the browser."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Discard the session token.

        Client-side only. A copied token stays valid until it expires.
        """
        pass
