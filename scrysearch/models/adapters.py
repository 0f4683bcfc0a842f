"""
Scryfall TypeAdapters for validated parsing.

Every decode failure surfaces as a DecodeError naming the field path,
so callers never see pydantic's exception types.
"""

from __future__ import annotations

from typing import Any, Union

import orjson
from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError
from .scryfall import ScryfallCard, ScryfallList

RawJson = Union[bytes, str, dict]

# Lazy init to avoid import-time cost
_card_adapter: TypeAdapter | None = None
_search_adapter: TypeAdapter | None = None


def get_card_adapter() -> TypeAdapter:
    """Get or create card TypeAdapter."""
    global _card_adapter
    if _card_adapter is None:
        _card_adapter = TypeAdapter(ScryfallCard)
    return _card_adapter


def get_search_adapter() -> TypeAdapter:
    """Get or create the card search envelope TypeAdapter."""
    global _search_adapter
    if _search_adapter is None:
        _search_adapter = TypeAdapter(ScryfallList[ScryfallCard])
    return _search_adapter


def _validate(adapter: TypeAdapter, raw: RawJson) -> Any:
    # Strict JSON mode: a value of the wrong JSON type fails instead of
    # being coerced, while arrays still fill sets and ints still fill floats.
    body = orjson.dumps(raw) if isinstance(raw, dict) else raw
    try:
        return adapter.validate_json(body, strict=True)
    except ValidationError as error:
        first = error.errors()[0]
        path = ".".join(str(part) for part in first["loc"])
        raise DecodeError(path, first["msg"]) from error


def decode_card(raw: RawJson) -> ScryfallCard:
    """Validate a single card object."""
    return _validate(get_card_adapter(), raw)  # type: ignore[no-any-return]


def decode_search_response(raw: RawJson) -> ScryfallList[ScryfallCard]:
    """Validate a /cards/search response page."""
    return _validate(get_search_adapter(), raw)  # type: ignore[no-any-return]


def encode_card(card: ScryfallCard) -> dict[str, Any]:
    """Dump a card back to Scryfall's JSON shape, leaving out absent fields."""
    return card.model_dump(mode="json", exclude_none=True)
