"""Infrastructure providers."""

# Import bases
from .adapters import AdapterRegistryProvider
from .cookies import CookieProvider
from .epic import EpicProvider
from .steam import SteamProvider

# Import implementations (needed for __subclasses__())
from .cookies import ProdCookieProvider  # noqa: F401
from .epic import ProdEpicProvider  # noqa: F401
from .steam import ProdSteamProvider  # noqa: F401

__all__ = [
    "AdapterRegistryProvider",
    "CookieProvider",
    "EpicProvider",
    "ProdCookieProvider",
    "ProdEpicProvider",
    "ProdSteamProvider",
    "SteamProvider",
]
