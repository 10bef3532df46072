from __future__ import annotations

from typing import Optional

import requests


class OpapError(Exception):
    """Base class for every error raised by the client.

    `response` is the HTTP response received before the failure, or None
    when the request never produced one.
    """

    def __init__(self, message: str, response: Optional[requests.Response] = None) -> None:
        super().__init__(message)
        self.response = response


class MalformedURLError(OpapError):
    """A request URL could not be built. No network attempt was made."""


class TransportError(OpapError):
    """The request failed at the network level."""


class HTTPStatusError(OpapError):
    """The server answered with a status outside 200-299."""

    def __init__(
        self,
        status_code: int,
        method: str,
        url: str,
        body: str,
        response: Optional[requests.Response] = None,
    ) -> None:
        super().__init__(f"{method} {url}: {status_code} {body}", response=response)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.body = body


class DecodeError(OpapError):
    """A successful response body did not decode into the expected shape."""

    def __init__(
        self,
        cause: Exception,
        body: str,
        response: Optional[requests.Response] = None,
    ) -> None:
        super().__init__(f"JSON decoding: {cause} ({body})", response=response)
        self.cause = cause
        self.body = body
