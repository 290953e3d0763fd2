"""Provider callback use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase
from hub.domain.model import LinkedAccount
from hub.domain.repository import CredentialChannel, LinkedAccountStore, StateStore
from hub.domain.service import AuthService
from hub.domain.value import GameProvider


class HandleCallbackRequest(BaseModel):
    """Provider callback request."""

    provider: GameProvider
    params: dict[str, str]  # Raw callback query parameters


class HandleCallbackResponse(BaseModel):
    """Provider callback response."""

    provider: GameProvider
    provider_id: str


class HandleCallbackUseCase(BaseUseCase):
    """Use case for verifying a provider callback and linking the identity."""

    def __init__(
        self,
        auth_service: AuthService,
        state_store: StateStore,
        credential_channel: CredentialChannel,
        linked_account_store: LinkedAccountStore,
    ) -> None:
        """Initialize handle callback use case.

        Args:
            auth_service: Dispatches to provider adapters
            state_store: Holds the state token issued at login start
            credential_channel: Hands the identity to session completion
            linked_account_store: Ledger of linked identities
        """
        self.auth_service = auth_service
        self.state_store = state_store
        self.credential_channel = credential_channel
        self.linked_account_store = linked_account_store

    async def execute(self, request: HandleCallbackRequest) -> HandleCallbackResponse:
        """Verify the callback, link the identity and queue it for sign-in.

        Steps:
        1. Consume the stored state token (whatever the outcome)
        2. Let the provider adapter verify the assertion
        3. Upsert the identity into the ledger
        4. Put the identity in the credential channel

        Nothing is written to the ledger or the channel if verification
        fails.

        Raises:
            DomainError: If the provider rejects the callback
        """
        provider = request.provider
        stored_state = None
        if self.auth_service.uses_state(provider):
            stored_state = await self.state_store.take(provider)

        with logfire.span("handle_callback", provider=provider.value):
            identity = await self.auth_service.complete_login(
                provider, request.params, stored_state
            )

            # Linking does not depend on an existing session, so a user
            # signed in elsewhere can add this provider.
            await self.linked_account_store.upsert(LinkedAccount.from_identity(identity))
            await self.credential_channel.put(identity)

            logfire.info(
                "Provider identity linked",
                provider=provider.value,
                provider_id=identity.provider_id,
            )

        return HandleCallbackResponse(provider=provider, provider_id=identity.provider_id)
