"""Common utility functions and helpers for the wttrcli package."""

from wttrcli.utils.formatting import format_hours, format_temperature

__all__ = [
    "format_hours",
    "format_temperature",
]
