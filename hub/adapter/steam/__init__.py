"""Steam integration."""

from .openid import SteamOpenIDAdapter, extract_steam_id

__all__ = ["SteamOpenIDAdapter", "extract_steam_id"]
