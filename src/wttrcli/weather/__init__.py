"""Weather package - holds the request pipeline, models, and custom errors."""

from .errors import (
    ClientError,
    DecodeError,
    HTTPStatusError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    WeatherAPIError,
)
from .models import WeatherDay, WeatherResponse
from .pipeline import build_weather_client, session_client

# Define what gets imported with: from wttrcli.weather import *
__all__ = [
    "ClientError",
    "DecodeError",
    "HTTPStatusError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "WeatherAPIError",
    "WeatherDay",
    "WeatherResponse",
    "build_weather_client",
    "session_client",
]
