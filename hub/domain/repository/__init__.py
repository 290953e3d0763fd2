"""Store interfaces."""

from .credential_channel import CredentialChannel
from .linked_account import LinkedAccountStore
from .session_token import SessionTokenStore
from .state import StateStore

__all__ = [
    "CredentialChannel",
    "LinkedAccountStore",
    "SessionTokenStore",
    "StateStore",
]
