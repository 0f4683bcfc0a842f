"""
Canned searches run once when the server starts
"""

import logging
from typing import Dict, List, Tuple

from ...models import ScryfallCard, ScryfallList
from .client import ScryfallClient

LOGGER = logging.getLogger(__name__)

# Murders at Karlov Manor main set, without the boosters-only extras
MKM_BASE_QUERY: str = "e:mkm cn≥1 cn≤286"

# The List reprints that shipped in Murders at Karlov Manor boosters
MKM_LIST_COLLECTOR_NUMBERS: List[str] = [
    "APC-117",
    "MH1-21",
    "DIS-33",
    "XLN-91",
    "C16-47",
    "SOM-96",
    "STX-64",
    "MH2-191",
    "ISD-183",
    "DKA-143",
    "DST-40",
    "MRD-99",
    "ELD-107",
    "DKA-4",
    "M20-167",
    "RTR-140",
    "ONS-89",
    "WAR-54",
    "DOM-130",
    "HOU-149",
    "MBS-10",
    "RAV-277",
    "2X2-17",
    "STX-220",
    "M14-213",
    "KLD-221",
    "ARB-68",
    "JOU-153",
    "RNA-182",
    "C21-19",
    "UMA-138",
    "MH2-46",
    "VOW-207",
    "ONS-272",
    "UMA-247",
    "SOM-98",
    "DDU-50",
    "CLB-85",
    "DIS-173",
    "SOI-262",
]


def build_list_query(collector_numbers: List[str]) -> str:
    """
    Build a Scryfall query matching specific cards from The List (plst)
    :param collector_numbers: plst collector numbers, "<SET>-<NUMBER>"
    :return: Search expression
    """
    terms = " OR ".join(f'cn:"{number}"' for number in collector_numbers)
    return f"e:plst ({terms})"


def startup_queries() -> Dict[str, List[Tuple[str, str]]]:
    """
    Query parameters for every startup search, keyed by a short label
    """
    return {
        "base": [("q", MKM_BASE_QUERY), ("unique", "prints")],
        "list": [
            ("q", build_list_query(MKM_LIST_COLLECTOR_NUMBERS)),
            ("unique", "prints"),
        ],
    }


async def fetch_startup_cards(
    client: ScryfallClient,
) -> Dict[str, ScryfallList[ScryfallCard]]:
    """
    Run the startup searches one after another. The first failure propagates.
    :param client: Open Scryfall client owned by the caller
    :return: Decoded first page of each search
    """
    results: Dict[str, ScryfallList[ScryfallCard]] = {}
    for label, params in startup_queries().items():
        LOGGER.debug(f"Running startup search '{label}'")
        results[label] = await client.search(params)

    LOGGER.info(
        "Startup fetch finished: "
        + ", ".join(f"{label}={page.total_cards}" for label, page in results.items())
    )
    return results
