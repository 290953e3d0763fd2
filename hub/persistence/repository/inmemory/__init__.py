"""In-memory store implementations for testing."""

from .credential_channel import InMemoryCredentialChannel
from .linked_account import InMemoryLinkedAccountStore
from .session_token import InMemorySessionTokenStore
from .state import InMemoryStateStore

__all__ = [
    "InMemoryCredentialChannel",
    "InMemoryLinkedAccountStore",
    "InMemorySessionTokenStore",
    "InMemoryStateStore",
]
