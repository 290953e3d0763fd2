"""Begin login use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase
from hub.domain.repository import StateStore
from hub.domain.service import AuthService, StateTokenService
from hub.domain.value import GameProvider


class BeginLoginRequest(BaseModel):
    """Begin login request."""

    provider: GameProvider


class BeginLoginResponse(BaseModel):
    """Begin login response."""

    redirect_url: str


class BeginLoginUseCase(BaseUseCase):
    """Use case for starting a provider's redirect-based login."""

    def __init__(
        self,
        auth_service: AuthService,
        state_token_service: StateTokenService,
        state_store: StateStore,
    ) -> None:
        """Initialize begin login use case.

        Args:
            auth_service: Dispatches to provider adapters
            state_token_service: Issues anti-forgery tokens
            state_store: Remembers the token until the callback
        """
        self.auth_service = auth_service
        self.state_token_service = state_token_service
        self.state_store = state_store

    async def execute(self, request: BeginLoginRequest) -> BeginLoginResponse:
        """Build the provider redirect.

        Providers whose protocol carries a state parameter get a fresh
        token, stored for the callback. Steam's OpenID flow has none.

        Raises:
            ProviderNotSupportedError: Provider has no login flow
            ConfigurationMissingError: Provider credentials not configured
        """
        state = None
        if self.auth_service.uses_state(request.provider):
            state = self.state_token_service.issue()

        redirect_url = await self.auth_service.initiate_login(request.provider, state)

        if state is not None:
            await self.state_store.put(request.provider, state)

        logfire.info(
            "Login redirect issued",
            provider=request.provider.value,
            with_state=state is not None,
        )
        return BeginLoginResponse(redirect_url=redirect_url)
