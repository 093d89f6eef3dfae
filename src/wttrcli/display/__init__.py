"""Output rendering for decoded forecasts."""

from .render import ForecastRenderer

__all__ = ["ForecastRenderer"]
