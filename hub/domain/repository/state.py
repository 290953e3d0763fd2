"""State token store interface."""

from abc import ABC, abstractmethod

from hub.domain.value import GameProvider


class StateStore(ABC):
    """Holds the anti-forgery token of the login attempt in flight."""

    @abstractmethod
    async def put(self, provider: GameProvider, token: str) -> None:
        """Remember the token issued for a provider's login redirect."""
        pass

    @abstractmethod
    async def take(self, provider: GameProvider) -> str | None:
        """Consume the stored token.

        Returns:
            The stored token, or None if there is none
        """
        pass
