"""Request configuration resolved from the command line."""

from __future__ import annotations

import urllib.parse

import requests
from pydantic import BaseModel, ConfigDict, Field, field_validator

from wttrcli.constants import DEFAULT_BASE_URL


class RequestConfig(BaseModel):
    """Configuration for a single weather lookup.

    Built once per process from the command-line arguments and immutable
    afterwards. ``location`` is absent when the service should resolve the
    caller's location itself.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    location: str | None = Field(None, min_length=1, description="Location to look up")
    base_url: str = Field(DEFAULT_BASE_URL, alias="url", description="Service root URL")

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, v: str) -> str:
        parsed = urllib.parse.urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"expected an absolute http(s) URL, got {v!r}")
        if parsed.query or parsed.fragment:
            raise ValueError("URL must not carry a query string or fragment")
        try:
            requests.PreparedRequest().prepare_url(v, None)
        except requests.RequestException as exc:
            raise ValueError(f"invalid host or port in {v!r}: {exc}") from None
        return v.rstrip("/")
