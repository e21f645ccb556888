# newsapi_lite/errors.py
from __future__ import annotations
from typing import Optional

# API error code -> message shown to the caller
KNOWN_CODES = {
    "apiKeyDisabled": "the API key has been disabled",
}
UNHANDLED_MESSAGE = "unhandled error"
UNKNOWN_MESSAGE = "unknown error"


class NewsAPIError(Exception):
    """Base class for every failure raised by the client."""

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


class RequestFailed(NewsAPIError):
    """Raised when the request could not be sent (connection, DNS, TLS, timeout)."""


class BodyReadFailed(NewsAPIError):
    """Raised when the response body could not be read."""


class ResponseDecodeFailed(NewsAPIError):
    """Raised when the response body is not the expected JSON envelope."""


class URLParseError(NewsAPIError):
    """Raised when the request URL cannot be built."""


class BadRequest(NewsAPIError):
    """
    The API answered but reported a non-"ok" status.

    ``message`` is the human text, ``code`` the raw API error code (None when
    the API sent none) and ``detail`` the API's own explanation if present.
    """

    def __init__(self, message: str, code: Optional[str] = None, detail: Optional[str] = None):
        super().__init__(f"request failed: {message}")
        self.message = message
        self.code = code
        self.detail = detail


def map_response_error(code: Optional[str], detail: Optional[str] = None) -> BadRequest:
    if code is None:
        return BadRequest(UNKNOWN_MESSAGE, None, detail)
    return BadRequest(KNOWN_CODES.get(code, UNHANDLED_MESSAGE), code, detail)
