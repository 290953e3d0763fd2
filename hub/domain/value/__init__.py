"""Domain value objects for the game library hub."""

from hub.domain.value.types import GameProvider

__all__ = ["GameProvider"]
