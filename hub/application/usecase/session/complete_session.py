"""Complete session use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.base import BaseUseCase, CamelModel
from hub.config import Settings
from hub.domain.repository import CredentialChannel, SessionTokenStore
from hub.domain.service import SessionService
from hub.domain.value import GameProvider


class CompleteSessionRequest(BaseModel):
    """Complete session request."""

    provider: GameProvider


class CompleteSessionResponse(CamelModel):
    """Complete session response.

    ``authenticated`` is false when no credential was waiting; the caller
    treats that as nothing to do.
    """

    authenticated: bool
    linking: bool = False
    redirect_url: str | None = None


class CompleteSessionUseCase(BaseUseCase):
    """Use case for turning a transient credential into a session."""

    def __init__(
        self,
        session_service: SessionService,
        credential_channel: CredentialChannel,
        session_token_store: SessionTokenStore,
        settings: Settings,
    ) -> None:
        """Initialize complete session use case.

        Args:
            session_service: Mints and decodes session tokens
            credential_channel: Where the callback left the identity
            session_token_store: Where the browser keeps its session
            settings: Application settings (frontend URL)
        """
        self.session_service = session_service
        self.credential_channel = credential_channel
        self.session_token_store = session_token_store
        self.settings = settings

    async def execute(self, request: CompleteSessionRequest) -> CompleteSessionResponse:
        """Mint a session from the waiting credential, if there is one.

        Called speculatively on page load, so a missing or unreadable
        credential is not an error.

        Returns:
            Whether a session was issued, whether the browser was already
            signed in (linking), and where to send it next
        """
        existing = self.session_service.decode(await self.session_token_store.get())

        identity = await self.credential_channel.take(request.provider)
        if identity is None:
            logfire.info("No transient credential waiting", provider=request.provider.value)
            return CompleteSessionResponse(authenticated=False)

        token = self.session_service.issue(identity)
        await self.session_token_store.put(token)

        linking = existing is not None
        frontend_url = self.settings.api.frontend_url
        redirect_url = (
            f"{frontend_url}/auth/signin?linking=true"
            if linking
            else f"{frontend_url}/dashboard"
        )

        return CompleteSessionResponse(
            authenticated=True, linking=linking, redirect_url=redirect_url
        )
