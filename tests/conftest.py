"""Pytest configuration and fixtures for scrysearch tests."""

import asyncio
import json
from pathlib import Path
from typing import Any, AsyncGenerator, Dict, Generator, List

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from scrysearch.scrysearch_config import ScrysearchConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "scryfall"


def load_fixture(name: str) -> Dict[str, Any]:
    """Load a JSON fixture file and return parsed data."""
    return json.loads((FIXTURES_DIR / f"{name}.json").read_text(encoding="utf-8"))


@pytest.fixture
def two_card_page() -> Dict[str, Any]:
    return load_fixture("search_two_cards")


@pytest.fixture
def has_more_page() -> Dict[str, Any]:
    return load_fixture("search_has_more")


@pytest.fixture
def error_payload() -> Dict[str, Any]:
    return load_fixture("search_error")


class FakeScryfall:
    """
    Stand-in for api.scryfall.com. Every /cards/search request is recorded
    and answered with the configured status and body.
    """

    def __init__(self) -> None:
        self.base_url = ""
        self.status = 200
        self.body: bytes = b"{}"
        self.content_type = "application/json"
        self.delay = 0.0
        self.queries: List[List[tuple]] = []
        self.headers: List[Dict[str, str]] = []

    def respond_with(self, payload: Any, status: int = 200) -> None:
        self.status = status
        self.body = json.dumps(payload).encode("utf-8")

    async def handle_search(self, request: web.Request) -> web.Response:
        self.queries.append(list(request.rel_url.query.items()))
        self.headers.append(dict(request.headers))
        if self.delay:
            await asyncio.sleep(self.delay)
        return web.Response(
            status=self.status, body=self.body, content_type=self.content_type
        )


@pytest_asyncio.fixture
async def fake_scryfall() -> AsyncGenerator[FakeScryfall, None]:
    """Run a FakeScryfall on a local port for the duration of a test."""
    fake = FakeScryfall()
    app = web.Application()
    app.router.add_get("/cards/search", fake.handle_search)

    server = TestServer(app)
    await server.start_server()
    fake.base_url = f"http://{server.host}:{server.port}"
    yield fake
    await server.close()


@pytest.fixture
def reset_config() -> Generator[None, None, None]:
    """Make sure each test gets a freshly loaded configuration."""
    ScrysearchConfig.reset()
    yield
    ScrysearchConfig.reset()
