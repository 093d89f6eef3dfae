"""Plain-text rendering of a decoded forecast."""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from jinja2 import Environment, StrictUndefined, Template

from wttrcli.utils import format_hours, format_temperature
from wttrcli.weather.models import WeatherDay

ROW_FORMAT = "%-12s%-12s%-12s%-12s%-8s%s"


class ForecastRenderer:
    """Renders WeatherDay records as a fixed-width text table.

    One header line names the location, followed by one row per day with
    average, minimum and maximum temperatures in °C and °F, hours of
    sunshine and the UV index.
    """

    FORECAST_TEMPLATE = """\
{{ APP_TITLE }} for {{ location or "current location" }}
{% if days -%}
{{ ROW_FORMAT | format("Date", "Avg", "Min", "Max", "Sun", "UV") }}
{% for day in days -%}
{{ ROW_FORMAT | format(
    day.date.isoformat(),
    day.avg_temp_c | celsius ~ "/" ~ day.avg_temp_f | fahrenheit,
    day.min_temp_c | celsius ~ "/" ~ day.min_temp_f | fahrenheit,
    day.max_temp_c | celsius ~ "/" ~ day.max_temp_f | fahrenheit,
    day.sun_hours | hours,
    "%.0f" | format(day.uv_index)
) }}
{% endfor -%}
{% else -%}
No forecast data returned.
{% endif -%}
"""

    template: Template

    def __init__(self, title: str = "Weather") -> None:
        """Initialize the renderer.

        Args:
            title: Word used at the start of the header line
        """
        self.env = Environment(
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self._register_filters()
        self.env.globals.update({"APP_TITLE": title, "ROW_FORMAT": ROW_FORMAT})
        self.template = self.env.from_string(self.FORECAST_TEMPLATE)

    def _register_filters(self) -> None:
        """Register custom filters with the Jinja environment."""
        self.env.filters.update(
            {
                "celsius": lambda t: format_temperature(t, "°C"),
                "fahrenheit": lambda t: format_temperature(t, "°F"),
                "hours": format_hours,
            }
        )

    def render(self, days: Sequence[WeatherDay], location: str | None = None) -> str:
        """Render the forecast table.

        Args:
            days: Decoded forecast entries in chronological order
            location: Location the forecast was requested for

        Returns:
            Rendered text, newline terminated
        """
        return cast(str, self.template.render(days=list(days), location=location))
