"""Mock providers for testing."""

from .cookies import MockCookieProvider
from .epic import MockEpicProvider
from .steam import MockSteamProvider
from .container import build_test_container

__all__ = [
    "MockCookieProvider",
    "MockEpicProvider",
    "MockSteamProvider",
    "build_test_container",
]
