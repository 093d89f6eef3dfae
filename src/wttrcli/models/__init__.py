from .base import DateFromString, NumberFromString, WireModel

__all__ = ["DateFromString", "NumberFromString", "WireModel"]
