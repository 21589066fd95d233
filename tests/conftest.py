"""Pytest shared fixtures for the FusionAuth client tests."""
import json
import os
from types import SimpleNamespace
from typing import Any, Dict, Optional

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from fusionauth import FusionAuthClient

API_KEY = "test-api-key"
BASE_URL = "http://fusionauth.test:9011"


def make_response(status: int = 200, content: bytes = b"", headers: Optional[Dict[str, str]] = None) -> requests.Response:
    """Build a real ``requests.Response`` without touching the network."""
    response = requests.Response()
    response.status_code = status
    response._content = content
    response._content_consumed = True
    response.headers = CaseInsensitiveDict(headers or {})
    response.encoding = "utf-8"
    return response


class FakeHTTP:
    """Replacement for ``requests.Session.request`` that records every call.

    Installed on the class as a plain callable, so it is not bound to the session.
    Queue outcomes with ``respond()`` / ``fail()``; with an empty queue every
    call answers 200 with an empty body.
    """

    def __init__(self):
        self.calls = []
        self._outcomes = []

    def respond(self, status: int = 200, json_body: Any = None, content: bytes = b"", headers=None) -> requests.Response:
        if json_body is not None:
            content = json.dumps(json_body).encode("utf-8")
        response = make_response(status, content, headers)
        self._outcomes.append(response)
        return response

    def fail(self, error: Exception) -> None:
        self._outcomes.append(error)

    @property
    def last(self):
        assert self.calls, "no HTTP request was sent"
        return self.calls[-1]

    def __call__(self, method, url, **kwargs):
        self.calls.append(SimpleNamespace(method=method, url=url, **kwargs))
        outcome = self._outcomes.pop(0) if self._outcomes else make_response(200)
        if isinstance(outcome, Exception):
            raise outcome
        outcome.url = url
        return outcome


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from hitting the network.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _unexpected(session, method, url, *args, **kwargs):
        raise RuntimeError(f"Unexpected HTTP {method} in unit test: {url}")

    monkeypatch.setattr(requests.Session, "request", _unexpected)


@pytest.fixture()
def http(monkeypatch):
    """Recording fake transport installed on ``requests.Session.request``."""
    fake = FakeHTTP()
    monkeypatch.setattr(requests.Session, "request", fake)
    return fake


@pytest.fixture()
def fusionauth_client():
    """FusionAuthClient configured with a test API key and base URL."""
    return FusionAuthClient(API_KEY, BASE_URL)


@pytest.fixture()
def clean_env(monkeypatch):
    """Remove every FUSIONAUTH_* variable so settings tests start from scratch."""
    for name in list(os.environ):
        if name.startswith("FUSIONAUTH_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
