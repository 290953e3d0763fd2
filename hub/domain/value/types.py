"""Domain value types for the game library hub."""

from enum import Enum


class GameProvider(str, Enum):
    """Supported game platforms.

    Steam and Epic have full identity flows. GOG, PSN and Xbox only
    expose catalog fetchers for now.
    """

    STEAM = "steam"
    EPIC = "epic"
    GOG = "gog"
    PSN = "psn"
    XBOX = "xbox"

    @property
    def display_name(self) -> str:
        """Human readable platform label used on games."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    GameProvider.STEAM: "Steam",
    GameProvider.EPIC: "Epic Games",
    GameProvider.GOG: "GOG",
    GameProvider.PSN: "PlayStation",
    GameProvider.XBOX: "Xbox",
}
