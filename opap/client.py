from __future__ import annotations

import logging
import re
from typing import Any, Optional, Tuple, Type, TypeVar
from urllib.parse import urljoin, urlsplit

import requests
from pydantic import BaseModel, ValidationError

from .config import DEFAULT_BASE_URL, ClientSettings
from .draws import DrawsService
from .errors import DecodeError, HTTPStatusError, MalformedURLError, TransportError

ModelT = TypeVar("ModelT", bound=BaseModel)

# A "%" that does not start a two digit hex escape.
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def _parse_reference(raw: str) -> str:
    if _BAD_ESCAPE.search(raw):
        raise MalformedURLError(f"parse {raw!r}: invalid URL escape")
    if _CONTROL_CHARS.search(raw):
        raise MalformedURLError(f"parse {raw!r}: invalid control character in URL")
    try:
        urlsplit(raw)
    except ValueError as exc:
        raise MalformedURLError(f"parse {raw!r}: {exc}") from exc
    return raw


class Client:
    """Manages communication with the OPAP REST services.

    Every call goes through the given `requests.Session`; pass one to control
    headers, adapters or proxies. `timeout` (seconds) is applied to every
    request. Without a session the client creates and owns its own.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        _parse_reference(base_url)
        parts = urlsplit(base_url)
        if not parts.scheme or not parts.netloc:
            raise MalformedURLError(f"base URL must be absolute: {base_url!r}")
        if not parts.path.endswith("/"):
            raise MalformedURLError(f"base URL must have a trailing slash: {base_url!r}")

        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._base_url = base_url
        self._timeout = timeout
        self._logger = logger or logging.getLogger("opap.client")

        self.draws = DrawsService(self)

    @classmethod
    def from_settings(
        cls, settings: ClientSettings, session: Optional[requests.Session] = None
    ) -> "Client":
        client = cls(session, base_url=settings.base_url, timeout=settings.timeout_seconds)
        client.draws.endpoint = settings.draws_endpoint
        return client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def new_request(self, method: str, path: str, body: Any = None) -> requests.PreparedRequest:
        """Build a request for `path`, resolved relative to the base URL.

        Relative paths should be given without a leading slash, otherwise
        they replace the base URL's path instead of extending it.
        """
        url = urljoin(self._base_url, _parse_reference(path))
        try:
            return self._session.prepare_request(requests.Request(method, url, data=body))
        except (
            requests.exceptions.InvalidURL,
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            ValueError,
        ) as exc:
            raise MalformedURLError(f"{method} {url}: {exc}") from exc

    def do(
        self, request: requests.PreparedRequest, model: Optional[Type[ModelT]] = None
    ) -> Tuple[Optional[ModelT], requests.Response]:
        """Send `request` and decode the JSON response body into `model`.

        Returns the decoded model (None when no model is given) and the
        response. Errors raised after a response arrived carry it in their
        `response` attribute. The response is always closed on return.
        """
        self._logger.debug("%s %s", request.method, request.url)
        send_kwargs = self._session.merge_environment_settings(request.url, {}, True, None, None)
        try:
            response = self._session.send(request, timeout=self._timeout, **send_kwargs)
        except requests.RequestException as exc:
            raise TransportError(f"{request.method} {request.url}: {exc}") from exc

        try:
            try:
                body = response.content
            except requests.RequestException as exc:
                raise TransportError(f"reading response body: {exc}", response=response) from exc
            self._logger.debug(
                "%s %s -> %s (%d bytes)", request.method, request.url, response.status_code, len(body)
            )

            _check_response(response)

            if model is None:
                return None, response
            try:
                decoded = model.model_validate_json(body)
            except ValidationError as exc:
                raise DecodeError(exc, response.text, response=response) from exc
            return decoded, response
        finally:
            response.close()

    def get(
        self, path: str, model: Optional[Type[ModelT]] = None
    ) -> Tuple[Optional[ModelT], requests.Response]:
        request = self.new_request("GET", path)
        return self.do(request, model)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _check_response(response: requests.Response) -> None:
    if 200 <= response.status_code <= 299:
        return
    # After redirects, response.request is the last request sent.
    final = response.request
    raise HTTPStatusError(
        response.status_code,
        final.method or "",
        response.url or final.url or "",
        response.text,
        response=response,
    )
