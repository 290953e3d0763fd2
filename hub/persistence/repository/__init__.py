"""Store implementations."""

from .credential_channel import CookieCredentialChannel
from .linked_account import CookieLinkedAccountStore
from .session_token import CookieSessionTokenStore
from .state import CookieStateStore

__all__ = [
    "CookieCredentialChannel",
    "CookieLinkedAccountStore",
    "CookieSessionTokenStore",
    "CookieStateStore",
]
