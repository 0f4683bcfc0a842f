"""
Scrysearch: Scryfall card search client with a small static web server
"""

from .errors import DecodeError, NetworkError, ScryfallError, UpstreamError
from .providers import ScryfallClient

__all__ = [
    "DecodeError",
    "NetworkError",
    "ScryfallClient",
    "ScryfallError",
    "UpstreamError",
]
