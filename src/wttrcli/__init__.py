"""Command-line client for the wttr.in weather service."""

__version__ = "1.2.3"
