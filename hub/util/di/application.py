"""Application layer DI providers."""

from dishka import Scope, provide

from hub.application.usecase.auth import BeginLoginUseCase, HandleCallbackUseCase
from hub.application.usecase.game import GetGamesUseCase
from hub.application.usecase.linked_account import (
    ListLinkedAccountsUseCase,
    UnlinkAccountUseCase,
)
from hub.application.usecase.session import (
    CompleteSessionUseCase,
    GetSessionUseCase,
    SignOutUseCase,
)
from hub.config import Settings
from hub.domain.repository import (
    CredentialChannel,
    LinkedAccountStore,
    SessionTokenStore,
    StateStore,
)
from hub.domain.service import (
    AuthService,
    GameAggregationService,
    SessionService,
    StateTokenService,
)
from hub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Login use cases
    @provide(scope=Scope.REQUEST)
    def get_begin_login_use_case(
        self,
        auth_service: AuthService,
        state_token_service: StateTokenService,
        state_store: StateStore,
    ) -> BeginLoginUseCase:
        """Provide begin login use case."""
        return BeginLoginUseCase(
            auth_service=auth_service,
            state_token_service=state_token_service,
            state_store=state_store,
        )

    @provide(scope=Scope.REQUEST)
    def get_handle_callback_use_case(
        self,
        auth_service: AuthService,
        state_store: StateStore,
        credential_channel: CredentialChannel,
        linked_account_store: LinkedAccountStore,
    ) -> HandleCallbackUseCase:
        """Provide handle callback use case."""
        return HandleCallbackUseCase(
            auth_service=auth_service,
            state_store=state_store,
            credential_channel=credential_channel,
            linked_account_store=linked_account_store,
        )

    # Session use cases
    @provide(scope=Scope.REQUEST)
    def get_complete_session_use_case(
        self,
        session_service: SessionService,
        credential_channel: CredentialChannel,
        session_token_store: SessionTokenStore,
        settings: Settings,
    ) -> CompleteSessionUseCase:
        """Provide complete session use case."""
        return CompleteSessionUseCase(
            session_service=session_service,
            credential_channel=credential_channel,
            session_token_store=session_token_store,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_session_use_case(
        self, session_service: SessionService, session_token_store: SessionTokenStore
    ) -> GetSessionUseCase:
        """Provide get session use case."""
        return GetSessionUseCase(
            session_service=session_service, session_token_store=session_token_store
        )

    @provide(scope=Scope.REQUEST)
    def get_sign_out_use_case(
        self, session_token_store: SessionTokenStore
    ) -> SignOutUseCase:
        """Provide sign out use case."""
        return SignOutUseCase(session_token_store=session_token_store)

    # Library use cases
    @provide(scope=Scope.REQUEST)
    def get_get_games_use_case(
        self,
        session_service: SessionService,
        session_token_store: SessionTokenStore,
        linked_account_store: LinkedAccountStore,
        aggregation_service: GameAggregationService,
    ) -> GetGamesUseCase:
        """Provide get games use case."""
        return GetGamesUseCase(
            session_service=session_service,
            session_token_store=session_token_store,
            linked_account_store=linked_account_store,
            aggregation_service=aggregation_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_linked_accounts_use_case(
        self,
        session_service: SessionService,
        session_token_store: SessionTokenStore,
        linked_account_store: LinkedAccountStore,
    ) -> ListLinkedAccountsUseCase:
        """Provide list linked accounts use case."""
        return ListLinkedAccountsUseCase(
            session_service=session_service,
            session_token_store=session_token_store,
            linked_account_store=linked_account_store,
        )

    @provide(scope=Scope.REQUEST)
    def get_unlink_account_use_case(
        self,
        session_service: SessionService,
        session_token_store: SessionTokenStore,
        linked_account_store: LinkedAccountStore,
    ) -> UnlinkAccountUseCase:
        """Provide unlink account use case."""
        return UnlinkAccountUseCase(
            session_service=session_service,
            session_token_store=session_token_store,
            linked_account_store=linked_account_store,
        )
