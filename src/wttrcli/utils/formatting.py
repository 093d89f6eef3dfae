"""Text and number formatting utilities."""

from __future__ import annotations


def format_temperature(temp: float, unit: str = "°C") -> str:
    """Format temperature value with unit.

    Args:
        temp: Temperature value
        unit: Temperature unit

    Returns:
        Formatted temperature string
    """
    return f"{round(temp)}{unit}"


def format_hours(hours: float) -> str:
    """Format a duration in hours with one decimal (e.g. "8.5h")."""
    return f"{hours:.1f}h"
