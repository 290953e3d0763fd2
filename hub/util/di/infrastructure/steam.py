"""Steam infrastructure providers."""

from dishka import Scope, provide

from hub.adapter.steam import SteamOpenIDAdapter
from hub.config import Settings
from hub.util.di.base import ProviderBase


class SteamProvider(ProviderBase):
    """Steam component base."""

    __mock_component__ = "steam"


class ProdSteamProvider(SteamProvider):
    """Production Steam provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_steam_adapter(self, settings: Settings) -> SteamOpenIDAdapter:
        """Provide Steam OpenID adapter.

        The OpenID realm is this service's base URL and return_to its
        Steam callback. A missing Web API key is reported per request,
        not at startup.
        """
        return SteamOpenIDAdapter(
            settings=settings.steam,
            realm=settings.api.base_url,
            return_to=settings.auth.steam_callback_url,
        )
