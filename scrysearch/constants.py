"""
Scrysearch Constants that cannot be changed and are hardcoded intentionally
"""

import datetime
import os
import pathlib

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = pathlib.Path(__file__).resolve().parent.joinpath(
    "resources"
)
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("scrysearch.properties")
PUBLIC_PATH: pathlib.Path = RESOURCE_PATH.joinpath("public")
ENV_OUT_PATH: pathlib.Path = (
    pathlib.Path(os.environ.get("SCRYSEARCH_OUTPUT_PATH", TOP_LEVEL_DIR))
    .expanduser()
    .resolve()
)

LOG_PATH: pathlib.Path = ENV_OUT_PATH.joinpath("scrysearch_logs")

SCRYSEARCH_START_DATE: str = datetime.datetime.today().strftime("%Y-%m-%d")

SCRYFALL_API_URL: str = "https://api.scryfall.com"
SCRYFALL_SEARCH_PATH: str = "/cards/search"
SCRYFALL_HEADERS = {
    "User-Agent": "scrysearch/0.1",
    "Accept": "application/json",
}

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8080
DEFAULT_TIMEOUT: float = 30.0
