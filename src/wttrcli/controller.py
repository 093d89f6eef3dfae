"""Core controller driving one weather lookup."""

from __future__ import annotations

import logging
import urllib.parse
from typing import Final

import requests

from wttrcli.constants import APP_NAME, DEFAULT_TIMEOUT
from wttrcli.display.render import ForecastRenderer
from wttrcli.settings import RequestConfig
from wttrcli.weather.models import WeatherDay
from wttrcli.weather.pipeline import HttpClient, build_weather_client, session_client

logger: Final = logging.getLogger(__name__)

# Characters encodeURIComponent leaves as they are, besides alphanumerics and "_.-~"
LOCATION_SAFE_CHARS: Final = "!*'()"


def location_path(location: str | None) -> str:
    """Build the request path for a location.

    Args:
        location: Free-text location, or None for the caller's own location

    Returns:
        ``/`` or ``/`` followed by the percent-encoded location
    """
    if location is None:
        return "/"
    return "/" + urllib.parse.quote(location, safe=LOCATION_SAFE_CHARS)


class WeatherReport:
    """Runs one request/response cycle against the weather service.

    The workflow is strictly linear:
    1. Build the specialised client from the configured base URL
    2. Issue a single request for the root or location path
    3. Decode the response into WeatherDay records
    4. Hand the records to the renderer

    Any failure propagates to the caller unchanged; nothing is retried.
    """

    def __init__(
        self,
        config: RequestConfig,
        base_client: HttpClient | None = None,
        renderer: ForecastRenderer | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the report.

        Args:
            config: Resolved request configuration
            base_client: Optional client performing the HTTP exchange; a
                requests session is opened per fetch when omitted
            renderer: Optional custom output renderer
            timeout: Request timeout for the default client in seconds
        """
        self.config = config
        self.base_client = base_client
        self.renderer = renderer or ForecastRenderer(APP_NAME)
        self.timeout = timeout

    def request_path(self) -> str:
        """Path requested for the configured location."""
        return location_path(self.config.location)

    def fetch(self) -> list[WeatherDay]:
        """Fetch and decode the forecast.

        Returns:
            Forecast entries in the order returned by the service

        Raises:
            WeatherAPIError: On network, status or decoding failure
        """
        path = self.request_path()
        if self.base_client is not None:
            return self._fetch_with(self.base_client, path)

        with requests.Session() as session:
            return self._fetch_with(session_client(session, self.timeout), path)

    def _fetch_with(self, base_client: HttpClient, path: str) -> list[WeatherDay]:
        client = build_weather_client(base_client, self.config.base_url)
        days = client(path).weather
        logger.debug("Decoded %d forecast day(s) from %s", len(days), self.config.base_url)
        return days

    def run(self) -> str:
        """Fetch the forecast and render it as text."""
        days = self.fetch()
        return self.renderer.render(days, self.config.location)
