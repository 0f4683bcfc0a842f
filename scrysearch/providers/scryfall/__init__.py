"""
Scryfall 3rd party provider
"""

from .client import ScryfallClient
from .startup import fetch_startup_cards

__all__ = ["ScryfallClient", "fetch_startup_cards"]
