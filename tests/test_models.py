"""Tests for the wttr.in response models.

These tests verify that:
1. The sample j1 document decodes with every field converted
2. Order of the forecast days is preserved
3. Wrong primitives, missing keys and unparsable strings are rejected
4. Decoding is all-or-nothing
"""

from copy import deepcopy
from datetime import date
from typing import Any

import pytest
from pydantic import ValidationError

from wttrcli.weather.errors import DecodeError
from wttrcli.weather.models import WeatherDay, WeatherResponse


def test_decode_sample(wttr_json: dict[str, Any]) -> None:
    """The sample response decodes to typed values."""
    wx = WeatherResponse.decode(wttr_json)

    assert len(wx.weather) == 3
    first = wx.weather[0]
    assert first.date == date(2023, 10, 19)
    assert first.avg_temp_c == 13.0
    assert first.avg_temp_f == 55.0
    assert first.max_temp_c == 16.0
    assert first.max_temp_f == 61.0
    assert first.min_temp_c == 10.0
    assert first.min_temp_f == 50.0
    assert first.sun_hours == 6.5
    assert first.uv_index == 3.0


def test_decode_preserves_order(wttr_json: dict[str, Any]) -> None:
    wx = WeatherResponse.decode(wttr_json)
    assert [d.date.isoformat() for d in wx.weather] == [
        "2023-10-19",
        "2023-10-20",
        "2023-10-21",
    ]


def test_negative_and_decimal_strings(wttr_json: dict[str, Any]) -> None:
    wx = WeatherResponse.decode(wttr_json)
    assert wx.weather[2].min_temp_c == -1.0
    assert wx.weather[2].sun_hours == 8.7


def test_empty_weather_list_is_valid() -> None:
    assert WeatherResponse.decode({"weather": []}).weather == []


def test_models_are_immutable(wttr_json: dict[str, Any]) -> None:
    day = WeatherResponse.decode(wttr_json).weather[0]
    with pytest.raises(ValidationError):
        day.avg_temp_c = 1.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "field, value",
    [
        ("avgtempC", "warm"),
        ("maxtempF", ""),
        ("sunHour", "nan"),
        ("uvIndex", "inf"),
        ("avgtempF", "1_000"),
        ("date", "2023-13-40"),
        ("date", "yesterday"),
    ],
)
def test_unparsable_strings_are_rejected(
    wttr_json: dict[str, Any], field: str, value: str
) -> None:
    bad = deepcopy(wttr_json)
    bad["weather"][1][field] = value

    with pytest.raises(DecodeError) as excinfo:
        WeatherResponse.decode(bad)

    assert excinfo.value.paths == [f"weather.1.{field}"]


@pytest.mark.parametrize("value", [13, 13.5, None, ["13"]])
def test_wrong_primitive_is_rejected(wttr_json: dict[str, Any], value: Any) -> None:
    """Numbers must arrive as strings, exactly as wttr.in sends them."""
    bad = deepcopy(wttr_json)
    bad["weather"][0]["avgtempC"] = value

    with pytest.raises(DecodeError) as excinfo:
        WeatherResponse.decode(bad)

    assert excinfo.value.paths == ["weather.0.avgtempC"]


def test_missing_field_is_reported(wttr_json: dict[str, Any]) -> None:
    bad = deepcopy(wttr_json)
    del bad["weather"][2]["mintempF"]

    with pytest.raises(DecodeError) as excinfo:
        WeatherResponse.decode(bad)

    err = excinfo.value
    assert err.paths == ["weather.2.mintempF"]
    assert isinstance(err.original_error, ValidationError)
    assert "weather.2.mintempF" in str(err)


def test_every_failure_is_listed(wttr_json: dict[str, Any]) -> None:
    bad = deepcopy(wttr_json)
    bad["weather"][0]["uvIndex"] = "high"
    bad["weather"][2]["date"] = 20231021

    with pytest.raises(DecodeError) as excinfo:
        WeatherResponse.decode(bad)

    assert excinfo.value.paths == ["weather.0.uvIndex", "weather.2.date"]


@pytest.mark.parametrize("raw", [{}, {"weather": None}, {"weather": "sunny"}, [], "text"])
def test_wrong_shape_is_rejected(raw: Any) -> None:
    with pytest.raises(DecodeError):
        WeatherResponse.decode(raw)


def test_decode_json_rejects_invalid_json() -> None:
    with pytest.raises(DecodeError) as excinfo:
        WeatherResponse.decode_json(b"<html>Unknown location</html>")

    assert isinstance(excinfo.value.original_error, ValueError)
    assert excinfo.value.code == 0


def test_python_field_names_are_not_wire_keys(wttr_json: dict[str, Any]) -> None:
    """Only the wttr.in key names satisfy a field."""
    bad = deepcopy(wttr_json)
    bad["weather"][0]["avg_temp_c"] = bad["weather"][0].pop("avgtempC")

    with pytest.raises(DecodeError) as excinfo:
        WeatherResponse.decode(bad)

    assert excinfo.value.paths == ["weather.0.avgtempC"]
