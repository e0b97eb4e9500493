from __future__ import annotations

import json

import httpx
import pytest

from northcheck import cli
from northcheck.checkers import ReputationChecker

LINK_ENDPOINT = "https://link.example.test/check-url"
FILE_ENDPOINT = "https://file.example.test/check"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("NORTHCHECK_LINK_ENDPOINT", "NORTHCHECK_FILE_ENDPOINT", "LOG_LEVEL"):
        # setenv first so values loaded from a .env file are removed on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def make_checker():
    """Build a checker whose requests are answered by ``handler``."""

    def build(handler, **kwargs) -> ReputationChecker:
        return ReputationChecker(
            link_endpoint=LINK_ENDPOINT,
            file_endpoint=FILE_ENDPOINT,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return build


@pytest.fixture
def mock_upstream(monkeypatch, make_checker):
    """Route the CLI's checker through a mock transport.

    Call the returned function with a handler; it returns the list that
    collects every request the CLI sends.
    """

    def install(handler):
        seen: list[httpx.Request] = []

        def recording_handler(request: httpx.Request):
            seen.append(request)
            return handler(request)

        monkeypatch.setattr(cli, "_build_checker", lambda _settings: make_checker(recording_handler))
        return seen

    return install


@pytest.fixture
def json_response():
    def build(payload, status_code: int = 200):
        def handler(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=payload)

        return handler

    return build


@pytest.fixture
def sent_json():
    def decode(request: httpx.Request):
        return json.loads(request.content)

    return decode
