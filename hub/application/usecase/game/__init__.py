"""Game library use cases."""

from .get_games import GetGamesUseCase

__all__ = ["GetGamesUseCase"]
