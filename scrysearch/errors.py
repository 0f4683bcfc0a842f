"""
Errors raised while talking to Scryfall
"""

from typing import Any, Optional


class ScryfallError(Exception):
    """Base class for every failure of a Scryfall call."""


class NetworkError(ScryfallError):
    """Connection could not be established, broke mid-flight, or timed out."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{url}: {message}")


class DecodeError(ScryfallError):
    """
    Response body was not JSON, or did not match the expected schema.
    :param path: Dotted location of the offending field ("" for the whole body)
    """

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path or '<body>'}: {message}")


class UpstreamError(ScryfallError):
    """Scryfall answered with a non-success status code."""

    def __init__(self, status: int, payload: Any = None):
        self.status = status
        self.payload = payload
        self.details: Optional[str] = None
        if isinstance(payload, dict):
            self.details = payload.get("details")
        super().__init__(
            f"Scryfall returned HTTP {status}"
            + (f": {self.details}" if self.details else "")
        )
