"""Scryfall data models and schemas."""

import datetime
import re
from enum import Enum
from typing import Annotated, Any, Generic, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer

T = TypeVar("T")

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


def decode_uuid(value: Any) -> UUID:
    """
    Parse a Scryfall ID; accepts any letter case
    :param value: Hyphenated UUID string (or an existing UUID)
    :return: UUID object
    """
    if isinstance(value, UUID):
        return value
    if not isinstance(value, str):
        raise ValueError(f"UUID must be a string, not {type(value).__name__}")
    if not UUID_PATTERN.fullmatch(value):
        raise ValueError(f"expected a hyphenated UUID, got {value!r}")
    return UUID(value)


def encode_uuid(value: UUID) -> str:
    """
    Scryfall IDs are lowercase, hyphenated strings
    :param value: UUID object
    :return: Canonical string form
    """
    return str(value).lower()


def decode_iso_date(value: Any) -> datetime.date:
    """
    Parse a calendar date, rejecting anything with a time or zone component
    :param value: YYYY-MM-DD string (or an existing date)
    :return: Date object
    """
    if isinstance(value, datetime.datetime):
        raise ValueError("expected a calendar date without a time component")
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"expected a YYYY-MM-DD date, got {value!r}")
    return datetime.date.fromisoformat(value)


ScryfallId = Annotated[
    UUID,
    BeforeValidator(decode_uuid),
    PlainSerializer(encode_uuid, return_type=str),
]
IsoDate = Annotated[
    datetime.date,
    BeforeValidator(decode_iso_date),
    PlainSerializer(lambda value: value.isoformat(), return_type=str),
]


class Color(str, Enum):
    """Magic color symbols."""

    WHITE = "W"
    BLUE = "U"
    BLACK = "B"
    RED = "R"
    GREEN = "G"


class Rarity(str, Enum):
    """
    Card rarity levels, as documented by Scryfall.
    ScryfallCard.rarity is deliberately left a plain string.
    """

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    SPECIAL = "special"
    MYTHIC = "mythic"
    BONUS = "bonus"


ColorSet = Annotated[
    frozenset[Color],
    PlainSerializer(
        lambda colors: sorted(color.value for color in colors),
        return_type=list[str],
    ),
]


class ScryfallModel(BaseModel):
    """Immutable record that ignores fields Scryfall adds later."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class CardFace(ScryfallModel):
    """
    A single face of a multiface card.

    Multiface cards have a card_faces property containing at least two
    Card Face objects.
    """

    mana_cost: str = Field(
        description=(
            "The mana cost for this face. This value will be any empty string "
            "if the cost is absent."
        ),
    )
    name: str = Field(
        description="The name of this particular face.",
    )
    oracle_text: str = Field(
        description="The Oracle text for this face.",
    )
    type_line: str = Field(
        description="The type line of this particular face.",
    )


class ImageUris(ScryfallModel):
    """Available imagery for a card."""

    png: str = Field(
        description="A transparent PNG of the card (745x1040 pixels).",
    )
    border_crop: str = Field(
        description="A crop of the card including border (480x680 pixels).",
    )
    art_crop: str = Field(
        description="A crop of the card art (variable dimensions).",
    )
    large: str = Field(
        description="A large full card image (672x936 pixels).",
    )
    normal: str = Field(
        description="A medium-sized full card image (488x680 pixels).",
    )
    small: str = Field(
        description="A small full card image (146x204 pixels).",
    )


class PreviewMetadata(ScryfallModel):
    """When a card was first shown to the public."""

    previewed_at: IsoDate = Field(
        description="The date this card was previewed.",
    )


class ScryfallCard(ScryfallModel):
    """
    Scryfall Card object, trimmed to the fields this project reads.

    One printing of a card. Unknown fields are dropped on decode.
    """

    id: ScryfallId = Field(
        description="A unique ID for this card in Scryfall's database.",
    )
    layout: str = Field(
        description="A code for this card's layout.",
    )
    card_faces: Optional[list[CardFace]] = Field(
        default=None,
        description="An array of Card Face objects, if this card is multifaced.",
    )
    cmc: float = Field(
        description=(
            "The card's mana value. Note that some funny cards have fractional "
            "mana costs."
        ),
    )
    color_identity: ColorSet = Field(
        description="This card's color identity.",
    )
    colors: ColorSet = Field(
        description=(
            "This card's colors, if the overall card has colors defined by the "
            "rules. Otherwise the colors will be on the card_faces objects."
        ),
    )
    # "" covers both a missing cost and no cost at all
    mana_cost: str = Field(
        description=(
            "The mana cost for this card. This value will be any empty string "
            "if the cost is absent. Multi-faced cards will report this value "
            "in card faces."
        ),
    )
    name: str = Field(
        description=(
            "The name of this card. If this card has multiple faces, this field "
            "will contain both names separated by ' // '."
        ),
    )
    image_uris: Optional[ImageUris] = Field(
        default=None,
        description="An object listing available imagery for this card.",
    )
    rarity: str = Field(
        description=(
            "This card's rarity. One of common, uncommon, rare, special, "
            "mythic, or bonus."
        ),
    )
    preview: Optional[PreviewMetadata] = Field(
        default=None,
        description="Preview information, if this card was previewed.",
    )


class ScryfallList(ScryfallModel, Generic[T]):
    """Paginated list envelope returned by Scryfall search endpoints."""

    total_cards: int = Field(
        description="The total number of cards found across all pages.",
    )
    has_more: bool = Field(
        description="True if this List is paginated and there is a page beyond the current page.",
    )
    next_page: Optional[str] = Field(
        default=None,
        description="A URI for the next page, if there is one.",
    )
    data: list[T] = Field(
        description="The cards on this page.",
    )
