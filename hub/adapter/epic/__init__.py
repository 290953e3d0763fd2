"""Epic Games integration."""

from .oauth import EpicOAuthAdapter

__all__ = ["EpicOAuthAdapter"]
