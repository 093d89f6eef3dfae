"""Typed models for the wttr.in ``format=j1`` response.

Only the daily forecast summary is modelled; the rest of the document
(current conditions, hourly data, astronomy) is ignored.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import Field, ValidationError

from wttrcli.models.base import DateFromString, NumberFromString, WireModel
from wttrcli.weather.errors import DecodeError


class WeatherDay(WireModel):
    """One validated forecast entry for a single calendar date."""

    date: DateFromString
    avg_temp_c: NumberFromString = Field(..., alias="avgtempC")
    avg_temp_f: NumberFromString = Field(..., alias="avgtempF")
    max_temp_c: NumberFromString = Field(..., alias="maxtempC")
    max_temp_f: NumberFromString = Field(..., alias="maxtempF")
    min_temp_c: NumberFromString = Field(..., alias="mintempC")
    min_temp_f: NumberFromString = Field(..., alias="mintempF")
    sun_hours: NumberFromString = Field(..., alias="sunHour")
    uv_index: NumberFromString = Field(..., alias="uvIndex")


class WeatherResponse(WireModel):
    """Decoded daily forecast returned by one request.

    ``weather`` keeps the order of the upstream array, which is chronological.
    """

    weather: list[WeatherDay]

    @classmethod
    def decode(cls, raw: Any) -> WeatherResponse:
        """Validate already-parsed JSON into a WeatherResponse.

        Decoding is all-or-nothing: a single invalid entry fails the whole
        response.

        Args:
            raw: Parsed JSON value of any shape

        Returns:
            Validated WeatherResponse

        Raises:
            DecodeError: With one ``(path, reason)`` pair per failing field
        """
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            errors = [
                (".".join(str(part) for part in err["loc"]) or "<root>", err["msg"])
                for err in exc.errors()
            ]
            summary = ", ".join(path for path, _ in errors)
            raise DecodeError(
                f"Response does not match the weather schema ({summary})",
                errors,
                exc,
            ) from exc

    @classmethod
    def decode_json(cls, text: str | bytes) -> WeatherResponse:
        """Parse a JSON document and validate it into a WeatherResponse.

        Args:
            text: Raw response body

        Returns:
            Validated WeatherResponse

        Raises:
            DecodeError: If the body is not JSON or does not match the schema
        """
        try:
            raw = json.loads(text)
        except ValueError as exc:
            raise DecodeError(
                f"Response body is not valid JSON: {exc}",
                [("<root>", str(exc))],
                exc,
            ) from exc
        return cls.decode(raw)
