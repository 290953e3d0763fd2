"""One-shot credential channel interface."""

from abc import ABC, abstractmethod

from hub.domain.model import NormalizedIdentity
from hub.domain.value import GameProvider


class CredentialChannel(ABC):
    """Mailbox that hands a verified identity from callback to session issuance.

    One slot per provider. Produce once, consume once, expire quickly.
    """

    @abstractmethod
    async def put(self, identity: NormalizedIdentity) -> None:
        """Deposit a verified identity in its provider's slot."""
        pass

    @abstractmethod
    async def take(self, provider: GameProvider) -> NormalizedIdentity | None:
        """Remove and return the identity waiting in the provider's slot.

        The slot is emptied even when its content cannot be read.

        Returns:
            The identity, or None if the slot was empty or unreadable
        """
        pass
