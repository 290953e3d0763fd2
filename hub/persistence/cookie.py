"""Request-scoped cookie jar.

Every durable piece of state lives in browser cookies. Stores read the
cookies that came in with the request and queue writes here; the route
copies the queued writes onto whatever response it returns.
"""

from collections.abc import Mapping
from typing import Literal

from starlette.responses import Response

# Cookie names
SESSION_COOKIE = "session_token"
LEDGER_COOKIE = "linked-accounts"


def state_cookie(provider: str) -> str:
    """Cookie holding a provider's pending state token."""
    return f"{provider}-oauth-state"


def credential_cookie(provider: str) -> str:
    """Cookie carrying a verified identity to session completion."""
    return f"{provider}-user"


class CookieJar:
    """Incoming cookies plus the writes queued during one request.

    Reads see queued writes, so a store can read back what it just
    wrote within the same request.
    """

    def __init__(
        self,
        incoming: Mapping[str, str],
        secure: bool = False,
        domain: str | None = None,
        samesite: Literal["lax", "strict", "none"] = "lax",
    ) -> None:
        """Initialize cookie jar.

        Args:
            incoming: Cookies sent with the request
            secure: Set the secure attribute (production only)
            domain: Cookie domain for cross-subdomain deployments
            samesite: SameSite attribute for every cookie written
        """
        self._incoming = dict(incoming)
        # name -> (value, max_age); value None means delete
        self._pending: dict[str, tuple[str | None, int | None]] = {}
        self.secure = secure
        self.domain = domain
        self.samesite = samesite

    def get(self, name: str) -> str | None:
        """Current value of a cookie, taking queued writes into account."""
        if name in self._pending:
            return self._pending[name][0]
        return self._incoming.get(name) or None

    def set(self, name: str, value: str, max_age: int) -> None:
        """Queue an httpOnly cookie write."""
        self._pending[name] = (value, max_age)

    def delete(self, name: str) -> None:
        """Queue a cookie deletion."""
        self._pending[name] = (None, None)

    @property
    def pending(self) -> dict[str, tuple[str | None, int | None]]:
        """Queued writes, for inspection."""
        return dict(self._pending)

    def apply(self, response: Response) -> Response:
        """Copy queued writes onto a response.

        Cookies must be set on the response object actually returned,
        so routes that build a RedirectResponse pass that one in.
        """
        for name, (value, max_age) in self._pending.items():
            if value is None:
                response.delete_cookie(
                    key=name,
                    path="/",
                    domain=self.domain,
                    secure=self.secure,
                    httponly=True,
                    samesite=self.samesite,
                )
            else:
                response.set_cookie(
                    key=name,
                    value=value,
                    max_age=max_age,
                    path="/",
                    domain=self.domain,
                    secure=self.secure,
                    httponly=True,
                    samesite=self.samesite,
                )
        return response
