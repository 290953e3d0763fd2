"""Epic Games infrastructure providers."""

from dishka import Scope, provide

from hub.adapter.epic import EpicOAuthAdapter
from hub.config import Settings
from hub.domain.service import StateTokenService
from hub.util.di.base import ProviderBase


class EpicProvider(ProviderBase):
    """Epic component base."""

    __mock_component__ = "epic"


class ProdEpicProvider(EpicProvider):
    """Production Epic provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_epic_adapter(
        self, settings: Settings, state_token_service: StateTokenService
    ) -> EpicOAuthAdapter:
        """Provide Epic OAuth adapter.

        Missing client credentials are reported per request, not at startup.
        """
        return EpicOAuthAdapter(
            settings=settings.epic,
            redirect_uri=settings.auth.epic_callback_url,
            state_tokens=state_token_service,
        )
