"""Tests for the inbound aiohttp application."""

import asyncio
import logging

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestClient, TestServer

from scrysearch.errors import NetworkError
from scrysearch.scrysearch_config import ScrysearchConfig
from scrysearch.server import CLIENT_KEY, STARTUP_TASK_KEY, create_app


@pytest.fixture
def config(reset_config, tmp_path):
    """Config built from an empty file, so only defaults apply."""
    config = ScrysearchConfig(tmp_path / "missing.properties")
    config.timeout = 2.0
    return config


@pytest.fixture
def public_dir(tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    public.joinpath("index.html").write_text("<h1>Hello from MTG Hackathon!!!</h1>")
    public.joinpath("style.css").write_text("h1 { color: teal; }")
    return public


@pytest_asyncio.fixture
async def make_client():
    clients = []

    async def _make(app):
        client = TestClient(TestServer(app))
        await client.start_server()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        await client.close()


@pytest.mark.asyncio
async def test_public_index_and_assets(config, public_dir, make_client):
    config.startup_fetch = False
    client = await make_client(create_app(config, public_dir))

    for path in ("/public", "/public/"):
        resp = await client.get(path)
        assert resp.status == 200
        assert "Hello from MTG Hackathon!!!" in await resp.text()

    resp = await client.get("/public/style.css")
    assert resp.status == 200
    assert "teal" in await resp.text()

    resp = await client.get("/public/nope.css")
    assert resp.status == 404


@pytest.mark.asyncio
async def test_no_root_page(config, public_dir, make_client):
    config.startup_fetch = False
    client = await make_client(create_app(config, public_dir))

    resp = await client.get("/")
    assert resp.status == 404


@pytest.mark.asyncio
async def test_startup_fetch_disabled(config, public_dir, make_client):
    config.startup_fetch = False
    app = create_app(config, public_dir)
    await make_client(app)

    assert STARTUP_TASK_KEY not in app
    assert CLIENT_KEY not in app


@pytest.mark.asyncio
async def test_startup_fetch_runs_in_background(
    config, public_dir, make_client, fake_scryfall, two_card_page
):
    fake_scryfall.respond_with(two_card_page)
    config.api_url = fake_scryfall.base_url
    app = create_app(config, public_dir)
    await make_client(app)

    results = await app[STARTUP_TASK_KEY]

    assert results["base"].total_cards == 2
    assert len(fake_scryfall.queries) == 2


@pytest.mark.asyncio
async def test_failed_startup_fetch_does_not_block_static_route(
    config, public_dir, make_client, caplog
):
    config.api_url = "http://127.0.0.1:1"
    caplog.set_level(logging.ERROR, logger="scrysearch.server")
    app = create_app(config, public_dir)
    client = await make_client(app)

    task = app[STARTUP_TASK_KEY]
    await asyncio.wait([task])
    assert isinstance(task.exception(), NetworkError)

    resp = await client.get("/public/")
    assert resp.status == 200
    assert "Startup card fetch failed" in caplog.text


@pytest.mark.asyncio
async def test_cleanup_cancels_pending_fetch(
    config, public_dir, fake_scryfall, two_card_page
):
    fake_scryfall.respond_with(two_card_page)
    fake_scryfall.delay = 0.5
    config.api_url = fake_scryfall.base_url
    app = create_app(config, public_dir)

    client = TestClient(TestServer(app))
    await client.start_server()
    task = app[STARTUP_TASK_KEY]
    await client.close()

    assert task.cancelled()
    assert app[CLIENT_KEY]._session is None
