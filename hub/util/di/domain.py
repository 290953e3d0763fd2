"""Domain layer DI providers."""

from dishka import Scope, provide

from hub.config import AuthSettings
from hub.domain.service import (
    AuthService,
    GameAggregationService,
    ProviderAdapter,
    SessionService,
    StateTokenService,
)
from hub.domain.value import GameProvider
from hub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; the stateless token service is
    shared app-wide because adapters depend on it.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_state_token_service(self) -> StateTokenService:
        """Provide anti-forgery state token service."""
        return StateTokenService()

    @provide
    def get_auth_service(
        self, adapters: dict[GameProvider, ProviderAdapter]
    ) -> AuthService:
        """Provide multi-provider authentication domain service.

        Args:
            adapters: Dictionary mapping providers to their adapters

        Returns:
            AuthService configured with all available adapters
        """
        return AuthService(adapters=adapters)

    @provide
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session token domain service."""
        return SessionService(auth_settings=auth_settings)

    @provide
    def get_aggregation_service(
        self, auth_service: AuthService
    ) -> GameAggregationService:
        """Provide game aggregation domain service."""
        return GameAggregationService(auth_service=auth_service)
