"""In-memory linked-account ledger for testing."""

from hub.domain.model import LinkedAccount
from hub.domain.repository import LinkedAccountStore
from hub.domain.value import GameProvider


class InMemoryLinkedAccountStore(LinkedAccountStore):
    """In-memory implementation of LinkedAccountStore for testing."""

    def __init__(self) -> None:
        self._accounts: list[LinkedAccount] = []

    async def list_all(self) -> list[LinkedAccount]:
        """Get all linked accounts."""
        return list(self._accounts)

    async def upsert(self, account: LinkedAccount) -> None:
        """Replace in place or append."""
        for i, existing in enumerate(self._accounts):
            if existing.key == account.key:
                self._accounts[i] = account
                return

        self._accounts.append(account)

    async def remove(self, provider: GameProvider, provider_id: str) -> None:
        """Remove linked account."""
        self._accounts = [
            a for a in self._accounts if a.key != (provider, provider_id)
        ]
