"""Unlink account use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase
from hub.domain.repository import LinkedAccountStore, SessionTokenStore
from hub.domain.service import SessionService
from hub.domain.value import GameProvider

from .list_linked_accounts import LinkedAccountInfo, ListLinkedAccountsResponse


class UnlinkAccountRequest(BaseModel):
    """Unlink account request."""

    provider: GameProvider
    provider_id: str


class UnlinkAccountUseCase(BaseUseCase):
    """Use case for removing one identity from the ledger.

    The active session is left alone, even if it belongs to the unlinked
    identity.
    """

    def __init__(
        self,
        session_service: SessionService,
        session_token_store: SessionTokenStore,
        linked_account_store: LinkedAccountStore,
    ) -> None:
        self.session_service = session_service
        self.session_token_store = session_token_store
        self.linked_account_store = linked_account_store

    async def execute(self, request: UnlinkAccountRequest) -> ListLinkedAccountsResponse:
        """Unlink an account and return what is left.

        Raises:
            UnauthorizedError: If there is no valid session
        """
        self.session_service.require(await self.session_token_store.get())

        await self.linked_account_store.remove(request.provider, request.provider_id)
        logfire.info(
            "Account unlinked",
            provider=request.provider.value,
            provider_id=request.provider_id,
        )

        accounts = await self.linked_account_store.list_all()
        return ListLinkedAccountsResponse(
            accounts=[LinkedAccountInfo.from_account(a) for a in accounts]
        )
