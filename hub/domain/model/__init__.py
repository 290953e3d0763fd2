"""Domain models."""

from hub.domain.model.common import DomainModel
from hub.domain.model.game import Game
from hub.domain.model.identity import LinkedAccount, NormalizedIdentity
from hub.domain.model.session import Session

__all__ = [
    "DomainModel",
    "Game",
    "LinkedAccount",
    "NormalizedIdentity",
    "Session",
]
