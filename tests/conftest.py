import json
from pathlib import Path
from typing import Any

import pytest
import requests

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def wttr_json() -> dict[str, Any]:
    """Parsed wttr.in ``format=j1`` sample for Paris (three days)."""
    return json.loads((DATA_DIR / "wttr_sample.json").read_text(encoding="utf-8"))


def make_response(status_code: int, body: Any = None) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    resp = requests.Response()
    resp.status_code = status_code
    if body is None:
        resp._content = b""
    elif isinstance(body, (bytes, str)):
        resp._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        resp._content = json.dumps(body).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class RecordingClient:
    """Base client that records requests and replays a canned response."""

    def __init__(self, response: requests.Response) -> None:
        self.response = response
        self.requests: list[requests.PreparedRequest] = []

    def __call__(self, request: requests.Request) -> requests.Response:
        self.requests.append(request.prepare())
        return self.response

    @property
    def urls(self) -> list[str]:
        return [r.url or "" for r in self.requests]


@pytest.fixture
def recording_client(wttr_json: dict[str, Any]) -> RecordingClient:
    return RecordingClient(make_response(200, wttr_json))
