"""Get games use case."""

import logfire

from hub.application.usecase.base import BaseUseCase, CamelModel
from hub.domain.model import Game, LinkedAccount
from hub.domain.repository import LinkedAccountStore, SessionTokenStore
from hub.domain.service import GameAggregationService, SessionService


class GetGamesResponse(CamelModel):
    """Get games response."""

    games: list[Game]
    total_count: int


class GetGamesUseCase(BaseUseCase):
    """Use case for building the merged library of the signed-in user."""

    def __init__(
        self,
        session_service: SessionService,
        session_token_store: SessionTokenStore,
        linked_account_store: LinkedAccountStore,
        aggregation_service: GameAggregationService,
    ) -> None:
        """Initialize get games use case.

        Args:
            session_service: Validates the session
            session_token_store: Where the browser keeps its session
            linked_account_store: Ledger of linked identities
            aggregation_service: Fans out catalog fetches and merges them
        """
        self.session_service = session_service
        self.session_token_store = session_token_store
        self.linked_account_store = linked_account_store
        self.aggregation_service = aggregation_service

    async def execute(self, request: None = None) -> GetGamesResponse:
        """Fetch and merge games for every linked account.

        With an empty ledger the session's own identity is queried
        instead, so single-account sessions keep working.

        Raises:
            UnauthorizedError: If there is no valid session
        """
        session = self.session_service.require(await self.session_token_store.get())

        accounts = await self.linked_account_store.list_all()
        if not accounts:
            logfire.info(
                "Ledger empty, falling back to session identity",
                provider=session.identity.provider.value,
            )
            accounts = [LinkedAccount.from_identity(session.identity)]

        games = await self.aggregation_service.collect(accounts)
        return GetGamesResponse(games=games, total_count=len(games))
