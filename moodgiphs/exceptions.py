"""Error types raised while searching for giphs."""

from typing import Optional


class GiphSearchError(Exception):
    """Base exception for failed searches against the image provider."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(self.message)


class NetworkError(GiphSearchError):
    """Raised when the outbound request could not complete."""


class ParseError(GiphSearchError):
    """Raised when the response body is not valid JSON."""


class MalformedResponseError(GiphSearchError):
    """Raised when the JSON payload does not have the expected shape.

    Args:
        message (str): Error message
        index (Optional[int]): Position of the offending item in ``data``, if any
    """

    def __init__(self, message: str, url: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message, url)
        self.index = index
