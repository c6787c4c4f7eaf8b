from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest

from adapters.cine_list_api import CineListClient
from core.config import AppSettings

API = "http://api.test"
ORIGIN = "http://app.test"


class FakeBackend:
    """Records every request and answers with a configurable handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={}
        )

    def respond(self, status_code: int, **kwargs) -> None:
        self._handler = lambda request: httpx.Response(status_code, **kwargs)

    def fail(self, message: str = "Connection refused") -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(message, request=request)

        self._handler = _raise

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep exported CINE_LIST_* variables and the user config dir out of tests."""

    for key in list(os.environ):
        if key.upper().startswith("CINE_LIST_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_base_url=API,
        app_origin=ORIGIN,
    )


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(settings: AppSettings, backend: FakeBackend) -> CineListClient:
    return CineListClient(
        settings,
        session_cookies={"JSESSIONID": "session-123"},
        transport=httpx.MockTransport(backend),
    )
