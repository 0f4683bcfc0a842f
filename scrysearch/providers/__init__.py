"""
Upstream data providers
"""

from .scryfall import ScryfallClient, fetch_startup_cards

__all__ = ["ScryfallClient", "fetch_startup_cards"]
