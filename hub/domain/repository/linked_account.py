"""Linked-account store interface."""

from abc import ABC, abstractmethod

from hub.domain.model import LinkedAccount
from hub.domain.value import GameProvider


class LinkedAccountStore(ABC):
    """Ledger of every provider identity a browser has authenticated with.

    Keyed by (provider, provider_id). Independent of which identity is
    active in the current session.
    """

    @abstractmethod
    async def list_all(self) -> list[LinkedAccount]:
        """Get all linked accounts in insertion order.

        Returns:
            Linked accounts (empty if none or unreadable)
        """
        pass

    @abstractmethod
    async def upsert(self, account: LinkedAccount) -> None:
        """Replace the account with the same key in place, or append it.

        Args:
            account: The account to store
        """
        pass

    @abstractmethod
    async def remove(self, provider: GameProvider, provider_id: str) -> None:
        """Forget an account.

        Args:
            provider: The account's provider
            provider_id: The user's ID on that provider
        """
        pass
