"""Runtime settings management.

This package provides:
- RequestConfig: The resolved, immutable configuration of one invocation
"""

from .request import RequestConfig

__all__ = ["RequestConfig"]
