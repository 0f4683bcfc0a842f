"""
Scrysearch Configuration Service
"""

import configparser
import logging
import os
import pathlib
from typing import Optional

from . import constants
from .singleton import Singleton


class ScrysearchConfig(metaclass=Singleton):
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program.
    Environment variables (SCRYSEARCH_*) take priority over the file.
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    scrysearch_version: str
    host: str
    port: int
    api_url: str
    timeout: Optional[float]
    startup_fetch: bool
    database_url: Optional[str]

    def __init__(self, config_path: Optional[pathlib.Path] = None):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()
        self.__load_config_from_local_file(config_path or constants.CONFIG_PATH)

        self.scrysearch_version = self.config_parser.get(
            "SCRYSEARCH", "version", fallback="NO_VERSION_FOUND"
        )

        self.host = os.environ.get("SCRYSEARCH_HOST") or self.get(
            "Server", "host", constants.DEFAULT_HOST
        )
        self.port = int(
            os.environ.get("SCRYSEARCH_PORT")
            or self.get("Server", "port", str(constants.DEFAULT_PORT))
        )
        self.startup_fetch = self.get_boolean("Server", "startup_fetch", True)
        self.api_url = os.environ.get("SCRYSEARCH_SCRYFALL_URL") or self.get(
            "Scryfall", "api_url", constants.SCRYFALL_API_URL
        )
        self.timeout = self.__parse_timeout(
            os.environ.get("SCRYSEARCH_TIMEOUT")
            if "SCRYSEARCH_TIMEOUT" in os.environ
            else self.get("Scryfall", "timeout", str(constants.DEFAULT_TIMEOUT))
        )

        # Persistence is not wired up; the connection string is only carried
        self.database_url = os.environ.get("SCRYSEARCH_DATABASE_URL") or (
            self.get("Database", "url") or None
        )

    def __load_config_from_local_file(self, file_path: pathlib.Path) -> None:
        """
        Load local file from resources as Scrysearch configuration file
        :param file_path: Path to Configuration file
        """
        if not file_path.is_file():
            self.logger.warning(f"{file_path} not found, using defaults")
            return
        self.config_parser.read(str(file_path))

    @staticmethod
    def __parse_timeout(raw_value: Optional[str]) -> Optional[float]:
        """
        An empty or non-positive timeout means "no deadline"
        :param raw_value: Timeout as read from config/env
        :return Seconds, or None
        """
        if not raw_value:
            return None
        timeout = float(raw_value)
        return timeout if timeout > 0 else None

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_boolean(self, section: str, option: str, fallback: bool = False) -> bool:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Boolean)
        """
        if self.has_option(section, option):
            return self.config_parser.getboolean(section, option, fallback=fallback)
        return fallback

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
