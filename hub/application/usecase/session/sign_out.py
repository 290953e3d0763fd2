"""Sign out use case."""

import logfire

from hub.application.usecase.base import BaseUseCase
from hub.domain.repository import SessionTokenStore


class SignOutUseCase(BaseUseCase):
    """Use case for discarding the session token.

    There is no revocation list; a copied token stays valid until it
    expires. Linked accounts are kept.
    """

    def __init__(self, session_token_store: SessionTokenStore) -> None:
        self.session_token_store = session_token_store

    async def execute(self, request: None = None) -> None:
        await self.session_token_store.clear()
        logfire.info("Signed out")
