"""Pytest shared fixtures: a fake requests session and response builder."""
import json
import pathlib
import sys
from typing import Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
import requests


def make_response(
    status_code: int = 200,
    payload=None,
    *,
    content: Optional[bytes] = None,
    headers: Optional[dict] = None,
    url: str = "https://api.example.com/",
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.url = url
    resp.encoding = "utf-8"
    if content is None:
        content = json.dumps(payload).encode() if payload is not None else b""
    resp._content = content
    resp.headers["Content-Type"] = "application/json"
    for name, value in (headers or {}).items():
        resp.headers[name] = value
    return resp


class FakeSession:
    """Stands in for requests.Session: records calls and replays queued results.

    Queue either a Response (returned) or an exception instance (raised).
    """

    def __init__(self):
        self.calls = []
        self._queue = []
        self.closed = False

    def queue(self, *results):
        self._queue.extend(results)
        return self

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._queue:
            raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")
        result = self._queue.pop(0)
        if isinstance(result, Exception):
            raise result
        if result.url == "https://api.example.com/":
            result.url = url
        return result

    def close(self):
        self.closed = True

    @property
    def urls(self):
        return [call["url"] for call in self.calls]


@pytest.fixture()
def fake_session():
    return FakeSession()


@pytest.fixture(autouse=True)
def _no_run_secrets(monkeypatch, tmp_path):
    """Point /run/secrets at an empty directory so host secrets never leak into tests."""
    from apiclients.config import settings

    real_path = settings.Path
    empty = tmp_path / "run-secrets"
    empty.mkdir()

    def fake_path(target):
        if str(target) == "/run/secrets":
            return empty
        return real_path(target)

    monkeypatch.setattr(settings, "Path", fake_path)
    return empty
