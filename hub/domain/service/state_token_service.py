"""Anti-forgery state tokens for redirect-based login flows."""

import secrets

from .base import Service


class StateTokenService(Service):
    """Issues and checks one-shot state tokens.

    The caller stores the issued token (short-lived cookie) and embeds it
    in the provider redirect. The provider echoes it back on callback.
    """

    def __init__(self, nbytes: int = 32) -> None:
        """Initialize state token service.

        Args:
            nbytes: Random bytes per token
        """
        self.nbytes = nbytes

    def issue(self) -> str:
        """Generate a new URL-safe random token."""
        return secrets.token_urlsafe(self.nbytes)

    def verify(self, received: str | None, stored: str | None) -> bool:
        """Check a callback's state against the stored one.

        Args:
            received: State echoed back by the provider
            stored: State remembered when the flow began

        Returns:
            True only for an exact match of two non-empty strings
        """
        if not received or not stored:
            return False
        return secrets.compare_digest(received.encode(), stored.encode())
