"""Domain services."""

from .aggregation_service import GameAggregationService
from .auth_service import AuthService, ProviderAdapter
from .base import Service
from .session_service import SessionService
from .state_token_service import StateTokenService

__all__ = [
    "AuthService",
    "GameAggregationService",
    "ProviderAdapter",
    "Service",
    "SessionService",
    "StateTokenService",
]
