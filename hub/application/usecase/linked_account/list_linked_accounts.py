"""List linked accounts use case."""

from hub.application.usecase.base import BaseUseCase, CamelModel
from hub.domain.model import LinkedAccount
from hub.domain.repository import LinkedAccountStore, SessionTokenStore
from hub.domain.service import SessionService
from hub.domain.value import GameProvider


class LinkedAccountInfo(CamelModel):
    """Linked account as shown to the browser. Tokens stay server-side."""

    provider: GameProvider
    provider_id: str
    name: str
    image: str | None = None

    @classmethod
    def from_account(cls, account: LinkedAccount) -> "LinkedAccountInfo":
        return cls(
            provider=account.provider,
            provider_id=account.provider_id,
            name=account.name,
            image=account.image,
        )


class ListLinkedAccountsResponse(CamelModel):
    """List linked accounts response."""

    accounts: list[LinkedAccountInfo]


class ListLinkedAccountsUseCase(BaseUseCase):
    """Use case for listing the ledger of the signed-in browser."""

    def __init__(
        self,
        session_service: SessionService,
        session_token_store: SessionTokenStore,
        linked_account_store: LinkedAccountStore,
    ) -> None:
        self.session_service = session_service
        self.session_token_store = session_token_store
        self.linked_account_store = linked_account_store

    async def execute(self, request: None = None) -> ListLinkedAccountsResponse:
        """List linked accounts.

        Raises:
            UnauthorizedError: If there is no valid session
        """
        self.session_service.require(await self.session_token_store.get())

        accounts = await self.linked_account_store.list_all()
        return ListLinkedAccountsResponse(
            accounts=[LinkedAccountInfo.from_account(a) for a in accounts]
        )
