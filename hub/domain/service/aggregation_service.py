"""Game library aggregation domain service."""

import asyncio

import logfire

from hub.domain.model import Game, LinkedAccount

from .auth_service import AuthService
from .base import Service


class GameAggregationService(Service):
    """Fans out catalog fetches over linked accounts and merges the results."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize aggregation service.

        Args:
            auth_service: Provides per-provider catalog fetchers
        """
        self.auth_service = auth_service

    async def collect(self, accounts: list[LinkedAccount]) -> list[Game]:
        """Fetch every account's catalog and merge them.

        Fetches run concurrently. A failing fetch contributes nothing
        and never cancels the others.

        Args:
            accounts: Accounts to query, in the order results are merged

        Returns:
            Deduplicated games
        """
        with logfire.span("aggregation.collect", account_count=len(accounts)):
            results = await asyncio.gather(
                *(self._fetch_safely(account) for account in accounts)
            )
            merged = [game for games in results for game in games]
            return self.deduplicate(merged)

    async def _fetch_safely(self, account: LinkedAccount) -> list[Game]:
        try:
            games = await self.auth_service.fetch_catalog(account)
        except Exception as e:
            logfire.warn(
                "Catalog fetch failed, skipping provider",
                provider=account.provider.value,
                provider_id=account.provider_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return []

        logfire.info(
            "Catalog fetched",
            provider=account.provider.value,
            provider_id=account.provider_id,
            count=len(games),
        )
        return games

    @staticmethod
    def deduplicate(games: list[Game]) -> list[Game]:
        """Drop games whose name case-insensitively repeats an earlier one.

        The first occurrence wins, so fetch order decides which platform's
        entry survives.
        """
        seen: set[str] = set()
        unique = []
        for game in games:
            key = game.name.lower()
            if key in seen:
                continue
            seen.add(key)
            unique.append(game)
        return unique
