"""
Scrysearch Main Executor
"""

import argparse
import logging
import traceback

from aiohttp import web

from scrysearch import constants
from scrysearch.utils import init_logger

init_logger()
LOGGER: logging.Logger = logging.getLogger(__name__)


def apply_overrides(args: argparse.Namespace) -> None:
    """
    Command line flags win over the configuration file
    :param args: Parsed command line
    """
    from scrysearch.scrysearch_config import ScrysearchConfig

    config = ScrysearchConfig()
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port
    if args.timeout is not None:
        config.timeout = args.timeout if args.timeout > 0 else None
    if args.no_startup_fetch:
        config.startup_fetch = False


def dispatcher(args: argparse.Namespace) -> None:
    """
    Scrysearch Dispatcher
    """
    from scrysearch.scrysearch_config import ScrysearchConfig
    from scrysearch.server import create_app

    apply_overrides(args)
    config = ScrysearchConfig()

    web.run_app(
        create_app(config),
        host=config.host,
        port=config.port,
        access_log=logging.getLogger("aiohttp.access"),
        print=None,
    )


def main() -> None:
    """
    Scrysearch safe main call
    """
    from scrysearch.arg_parser import parse_args
    from scrysearch.scrysearch_config import ScrysearchConfig

    args = parse_args()
    config = ScrysearchConfig()

    LOGGER.info(
        f"Starting scrysearch {config.scrysearch_version} on "
        f"{constants.SCRYSEARCH_START_DATE} at http://{args.host or config.host}:"
        f"{args.port or config.port}"
    )

    try:
        dispatcher(args)
    except Exception as error:
        LOGGER.fatal(f"Exception caught: {error} {traceback.format_exc()}")
        raise


if __name__ == "__main__":
    main()
