"""Scryfall data models and type definitions."""

from .adapters import (
    decode_card,
    decode_search_response,
    encode_card,
)
from .scryfall import (
    CardFace,
    Color,
    ImageUris,
    PreviewMetadata,
    Rarity,
    ScryfallCard,
    ScryfallList,
    decode_uuid,
    encode_uuid,
)

__all__ = [
    "CardFace",
    "Color",
    "ImageUris",
    "PreviewMetadata",
    "Rarity",
    "ScryfallCard",
    "ScryfallList",
    "decode_card",
    "decode_search_response",
    "decode_uuid",
    "encode_card",
    "encode_uuid",
]
