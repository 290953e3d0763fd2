"""Provider adapter registry."""

from dishka import Scope, provide

from hub.adapter.epic import EpicOAuthAdapter
from hub.adapter.steam import SteamOpenIDAdapter
from hub.adapter.stub import gog_adapter, psn_adapter, xbox_adapter
from hub.config import Settings
from hub.domain.service import ProviderAdapter
from hub.domain.value import GameProvider
from hub.util.di.base import ProviderBase


class AdapterRegistryProvider(ProviderBase):
    """Provider that collects every platform adapter into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_adapters(
        self,
        settings: Settings,
        steam_adapter: SteamOpenIDAdapter,
        epic_adapter: EpicOAuthAdapter,
    ) -> dict[GameProvider, ProviderAdapter]:
        """Provide dictionary of all adapters by provider.

        GOG, PSN and Xbox are catalog-only and need no mocking.

        Returns:
            Dictionary mapping GameProvider to its adapter
        """
        return {
            GameProvider.STEAM: steam_adapter,
            GameProvider.EPIC: epic_adapter,
            GameProvider.GOG: gog_adapter(settings.gog),
            GameProvider.PSN: psn_adapter(settings.psn),
            GameProvider.XBOX: xbox_adapter(settings.xbox),
        }
