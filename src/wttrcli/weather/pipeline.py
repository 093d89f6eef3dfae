"""Composable HTTP client pipeline for the wttr.in service.

A client is any callable that takes a ``requests.Request`` and returns a
result. Layers are functions from one client to another, so a specialised
client is assembled by piping a base client through an ordered list of
layers::

    client = pipe(
        base_client,
        map_request(prepend_url("https://wttr.in")),
        map_request(append_url_param("format", "j1")),
        filter_status_ok,
        map_response(decode_body),
    )

Nothing here performs I/O until the assembled client is called.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import reduce
from typing import Any, Final, TypeVar

import requests

from wttrcli.constants import DEFAULT_TIMEOUT, FORMAT_PARAM
from wttrcli.weather.errors import HTTPStatusError, NetworkError
from wttrcli.weather.models import WeatherResponse

logger: Final = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

HttpClient = Callable[[requests.Request], requests.Response]
RequestMapper = Callable[[requests.Request], requests.Request]
Layer = Callable[[Callable[[requests.Request], Any]], Callable[[requests.Request], Any]]


# ── base clients ────────────────────────────────────────────────────────────
def session_client(
    session: requests.Session, timeout: float = DEFAULT_TIMEOUT
) -> HttpClient:
    """Adapt a requests session into a base client.

    Args:
        session: Session used to prepare and send requests
        timeout: Timeout for each request in seconds

    Returns:
        Client that sends the request and raises NetworkError on transport
        failures
    """

    def send(request: requests.Request) -> requests.Response:
        try:
            prepared = session.prepare_request(request)
            logger.debug("GET %s", prepared.url)
            return session.send(prepared, timeout=timeout)
        except requests.RequestException as exc:
            logger.warning("Weather service network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

    return send


# ── request mappers ─────────────────────────────────────────────────────────
def prepend_url(base_url: str) -> RequestMapper:
    """Return a mapper that prefixes the request URL with ``base_url``."""

    def mapper(request: requests.Request) -> requests.Request:
        request.url = f"{base_url}{request.url or ''}"
        return request

    return mapper


def append_url_param(key: str, value: str) -> RequestMapper:
    """Return a mapper that adds one query parameter to the request."""

    def mapper(request: requests.Request) -> requests.Request:
        params = dict(request.params or {})
        params[key] = value
        request.params = params
        return request

    return mapper


# ── layers ──────────────────────────────────────────────────────────────────
def map_request(
    mapper: RequestMapper,
) -> Callable[[Callable[[requests.Request], T]], Callable[[requests.Request], T]]:
    """Lift a request mapper into a layer applied before the client runs."""

    def layer(client: Callable[[requests.Request], T]) -> Callable[[requests.Request], T]:
        def mapped(request: requests.Request) -> T:
            return client(mapper(request))

        return mapped

    return layer


def map_response(
    fn: Callable[[T], U],
) -> Callable[[Callable[[requests.Request], T]], Callable[[requests.Request], U]]:
    """Lift a result transformation into a layer applied after the client runs."""

    def layer(client: Callable[[requests.Request], T]) -> Callable[[requests.Request], U]:
        def mapped(request: requests.Request) -> U:
            return fn(client(request))

        return mapped

    return layer


def filter_status_ok(client: HttpClient) -> HttpClient:
    """Layer that rejects responses whose status is outside 2xx.

    Raises:
        HTTPStatusError: Subclass chosen by status, carrying the body text
    """

    def filtered(request: requests.Request) -> requests.Response:
        resp = client(request)
        if not 200 <= resp.status_code < 300:
            err = HTTPStatusError.from_status(resp.status_code, resp.text)
            logger.debug("Weather service error: %s - %s", err.code, err.message)
            raise err
        return resp

    return filtered


def pipe(client: Callable[[requests.Request], Any], *layers: Layer) -> Callable[[requests.Request], Any]:
    """Apply ``layers`` to ``client`` left to right."""
    return reduce(lambda acc, layer: layer(acc), layers, client)


# ── weather client ──────────────────────────────────────────────────────────
def decode_body(resp: requests.Response) -> WeatherResponse:
    """Decode a successful response body into a WeatherResponse."""
    return WeatherResponse.decode_json(resp.content)


def build_weather_client(
    base_client: HttpClient, base_url: str
) -> Callable[[str], WeatherResponse]:
    """Specialise a base client for the wttr.in JSON API.

    Every call prepends ``base_url`` to the path, asks for ``format=j1``,
    rejects non-2xx statuses and decodes the body.

    Args:
        base_client: Client that performs the actual HTTP exchange
        base_url: Service root without trailing slash

    Returns:
        Function mapping a request path (``/`` or ``/<location>``) to the
        decoded response
    """
    client: Callable[[requests.Request], WeatherResponse] = pipe(
        base_client,
        map_request(prepend_url(base_url)),
        map_request(append_url_param(*FORMAT_PARAM)),
        filter_status_ok,
        map_response(decode_body),
    )

    def get(path: str) -> WeatherResponse:
        return client(requests.Request("GET", path))

    return get
