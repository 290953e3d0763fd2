"""Get session use case."""

from datetime import datetime

from hub.application.usecase.base import BaseUseCase, CamelModel
from hub.domain.repository import SessionTokenStore
from hub.domain.service import SessionService
from hub.domain.value import GameProvider


class SessionIdentityInfo(CamelModel):
    """Active identity, without tokens."""

    provider: GameProvider
    provider_id: str
    name: str | None
    image: str | None
    email: str | None


class GetSessionResponse(CamelModel):
    """Get session response."""

    authenticated: bool
    identity: SessionIdentityInfo | None = None
    expires_at: datetime | None = None


class GetSessionUseCase(BaseUseCase):
    """Use case for reporting the current session without raising."""

    def __init__(
        self, session_service: SessionService, session_token_store: SessionTokenStore
    ) -> None:
        self.session_service = session_service
        self.session_token_store = session_token_store

    async def execute(self, request: None = None) -> GetSessionResponse:
        session = self.session_service.decode(await self.session_token_store.get())
        if session is None:
            return GetSessionResponse(authenticated=False)

        identity = session.identity
        return GetSessionResponse(
            authenticated=True,
            identity=SessionIdentityInfo(
                provider=identity.provider,
                provider_id=identity.provider_id,
                name=identity.display_name,
                image=identity.avatar_url,
                email=identity.email,
            ),
            expires_at=session.expires_at,
        )
