"""
Inbound web server: static assets plus the Scryfall startup fetch
"""

import asyncio
import logging
import pathlib
from typing import Dict, Optional

from aiohttp import web

from . import constants
from .models import ScryfallCard, ScryfallList
from .providers import ScryfallClient, fetch_startup_cards
from .scrysearch_config import ScrysearchConfig

LOGGER = logging.getLogger(__name__)

CONFIG_KEY = web.AppKey("config", ScrysearchConfig)
PUBLIC_PATH_KEY = web.AppKey("public_path", pathlib.Path)
CLIENT_KEY = web.AppKey("scryfall_client", ScryfallClient)
STARTUP_TASK_KEY = web.AppKey("startup_fetch_task", asyncio.Task)

INDEX_DOCUMENT = "index.html"


async def public_index(request: web.Request) -> web.FileResponse:
    """Serve the default document for the public directory"""
    index = request.app[PUBLIC_PATH_KEY].joinpath(INDEX_DOCUMENT)
    if not index.is_file():
        raise web.HTTPNotFound()
    return web.FileResponse(index)


def _log_startup_fetch(task: "asyncio.Task[Dict[str, ScryfallList[ScryfallCard]]]") -> None:
    if task.cancelled():
        LOGGER.warning("Startup card fetch cancelled before it finished")
        return
    error = task.exception()
    if error is not None:
        LOGGER.error(f"Startup card fetch failed: {error}", exc_info=error)


async def start_card_fetch(app: web.Application) -> None:
    """
    Kick off the startup searches without holding up the server
    """
    config = app[CONFIG_KEY]
    if not config.startup_fetch:
        LOGGER.info("Startup card fetch disabled")
        return

    client = ScryfallClient(timeout=config.timeout, base_url=config.api_url)
    await client.open()
    app[CLIENT_KEY] = client

    task = asyncio.create_task(fetch_startup_cards(client))
    task.add_done_callback(_log_startup_fetch)
    app[STARTUP_TASK_KEY] = task


async def stop_card_fetch(app: web.Application) -> None:
    """
    Cancel a still running fetch and release the client's connections
    """
    task = app.get(STARTUP_TASK_KEY)
    if task is not None and not task.done():
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)

    client = app.get(CLIENT_KEY)
    if client is not None:
        await client.close()


def create_app(
    config: ScrysearchConfig, public_path: Optional[pathlib.Path] = None
) -> web.Application:
    """
    Build the aiohttp application
    :param config: Loaded configuration
    :param public_path: Directory served under /public
    :return: Application ready for web.run_app
    """
    app = web.Application()
    app[CONFIG_KEY] = config
    app[PUBLIC_PATH_KEY] = public_path or constants.PUBLIC_PATH

    app.router.add_get("/public", public_index)
    app.router.add_get("/public/", public_index)
    app.router.add_static("/public", app[PUBLIC_PATH_KEY])

    app.on_startup.append(start_card_fetch)
    app.on_cleanup.append(stop_card_fetch)
    return app
