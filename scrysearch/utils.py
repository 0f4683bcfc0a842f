"""
Scrysearch simple utilities
"""

import logging
import os
import time

from . import constants


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")
    debug = os.environ.get("SCRYSEARCH_DEBUG", "").lower() in ["true", "1"]

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"scrysearch_{start_time}.log"))
            ),
        ],
    )
    # One line per served request; only wanted while debugging
    logging.getLogger("aiohttp.access").setLevel(
        logging.DEBUG if debug else logging.WARNING
    )
