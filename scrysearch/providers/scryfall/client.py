"""Scryfall async HTTP client with connection pooling."""

import asyncio
import logging
import random
from typing import Any, Mapping, Sequence, Union

import aiohttp
import orjson

from ... import constants
from ...errors import NetworkError, UpstreamError
from ...models import ScryfallCard, ScryfallList, decode_search_response

LOGGER = logging.getLogger(__name__)

CONCURRENT_REQUESTS = 10

QueryParams = Union[Mapping[str, str], Sequence[tuple[str, str]]]


class ScryfallClient:
    """
    Async Scryfall API client.

    Owns one pooled aiohttp session. Nothing is retried: transport problems
    raise NetworkError, non-2xx answers raise UpstreamError and bodies that
    do not match the card schema raise DecodeError.
    """

    def __init__(
        self,
        timeout: float | None = constants.DEFAULT_TIMEOUT,
        base_url: str = constants.SCRYFALL_API_URL,
        headers: dict[str, str] | None = None,
        concurrent_limit: int = CONCURRENT_REQUESTS,
    ):
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")
        self.headers = {**constants.SCRYFALL_HEADERS, **(headers or {})}
        self.concurrent_limit = concurrent_limit
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "ScryfallClient":
        await self.open()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def open(self) -> None:
        """Create the pooled session, if not already open."""
        if self._session is not None:
            return
        connector = aiohttp.TCPConnector(limit=self.concurrent_limit)
        self._session = aiohttp.ClientSession(
            connector=connector,
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers=self.headers,
        )

    async def close(self) -> None:
        """Release the pooled connections."""
        if self._session:
            await self._session.close()
            self._session = None

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{constants.SCRYFALL_SEARCH_PATH}"

    async def _get(self, url: str, params: list[tuple[str, str]]) -> tuple[int, bytes]:
        """
        Execute a GET and read the whole body.

        Returns (status, body).
        """
        if self._session is None:
            raise RuntimeError("Client not initialized. Use async context manager.")

        try:
            async with self._session.get(url, params=params) as resp:
                return resp.status, await resp.read()
        except asyncio.TimeoutError as error:
            raise NetworkError(url, f"timed out after {self.timeout}s") from error
        except aiohttp.ClientError as error:
            raise NetworkError(url, str(error) or type(error).__name__) from error

    async def search(self, params: QueryParams) -> ScryfallList[ScryfallCard]:
        """
        Run a card search. Parameters are passed through untouched and in
        order; Scryfall itself validates the query syntax.

        Args:
            params: e.g. [("q", "e:mkm cn≥1"), ("unique", "prints")]
        """
        pairs = list(params.items()) if isinstance(params, Mapping) else list(params)
        status, body = await self._get(self.search_url, pairs)

        if not 200 <= status < 300:
            raise UpstreamError(status, _error_payload(body))

        page = decode_search_response(body)
        if page.data:
            sample = random.choice(page.data)
            LOGGER.info(
                f"Search {dict(pairs).get('q', '')!r}: {page.total_cards} cards "
                f"- {sample.name} ({sample.id}, {sample.rarity})"
            )
        else:
            LOGGER.info(
                f"Search {dict(pairs).get('q', '')!r}: {page.total_cards} cards "
                "- empty page"
            )
        return page


def _error_payload(body: bytes) -> Any:
    """Scryfall errors are JSON objects; fall back to raw text otherwise."""
    try:
        return orjson.loads(body)
    except orjson.JSONDecodeError:
        return body.decode("utf-8", errors="replace")
