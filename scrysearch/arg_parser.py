"""
Scrysearch Arg Parser to determine how to start the server
"""

import argparse
import logging
from typing import List, Optional

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments. Anything left unset falls back to
    the configuration file.
    :param argv: Arguments to parse (defaults to sys.argv)
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("scrysearch")

    parser.add_argument(
        "--host",
        metavar="HOST",
        default=None,
        help="Interface to bind the web server to.",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        metavar="PORT",
        default=None,
        help="Port to bind the web server to.",
    )
    parser.add_argument(
        "--timeout",
        "-t",
        type=float,
        metavar="SECONDS",
        default=None,
        help="Deadline for each Scryfall request. 0 disables the deadline.",
    )
    parser.add_argument(
        "--no-startup-fetch",
        action="store_true",
        help="Skip the Scryfall searches normally run at startup.",
    )

    return parser.parse_args(argv)
