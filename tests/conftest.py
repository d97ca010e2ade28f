"""Shared fixtures for the unipay test suite."""
from __future__ import annotations

import threading
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Callable
from unittest.mock import MagicMock

import httpx
import pytest

from unipay.auth import TokenGuard
from unipay.client import PayPalClient
from unipay.config import Config, PayPalSettings

API_BASE = "https://api.sandbox.paypal.com"


class FakeClock:
    """Manually advanced UTC clock for TokenGuard."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class FakePayPal:
    """Transport handler routing requests by (method, path) and recording them.

    The token endpoint answers with tok-1, tok-2, ... on successive calls.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.token_expires_in = 3600
        self.token_delay = 0.0
        self._routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self._lock = threading.Lock()
        self._tokens_issued = 0
        self.on("POST", "/v1/oauth2/token", self._issue_token)

    def on(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._routes[(method, path)] = handler

    def reply(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        content: bytes | None = None,
        delay: float = 0.0,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if delay:
                time.sleep(delay)
            if json is not None:
                return httpx.Response(status, json=json)
            return httpx.Response(status, content=content or b"")

        self.on(method, path, handler)

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @property
    def token_calls(self) -> list[httpx.Request]:
        return self.calls("POST", "/v1/oauth2/token")

    def __call__(self, request: httpx.Request) -> httpx.Response:
        with self._lock:
            self.requests.append(request)
        handler = self._routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND", "message": "No route"})
        return handler(request)

    def _issue_token(self, request: httpx.Request) -> httpx.Response:
        if self.token_delay:
            time.sleep(self.token_delay)
        with self._lock:
            self._tokens_issued += 1
            value = f"tok-{self._tokens_issued}"
        return httpx.Response(200, json={
            "access_token": value,
            "token_type": "Bearer",
            "expires_in": self.token_expires_in,
            "app_id": "APP-TEST",
            "nonce": "nonce-1",
        })


@pytest.fixture
def fake_settings() -> PayPalSettings:
    return PayPalSettings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        api_base=API_BASE,
    )


@pytest.fixture
def fake_config(fake_settings) -> Config:
    return Config(paypal=fake_settings)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_paypal() -> FakePayPal:
    return FakePayPal()


@pytest.fixture
def http(fake_paypal) -> httpx.Client:
    client = httpx.Client(transport=httpx.MockTransport(fake_paypal))
    yield client
    client.close()


@pytest.fixture
def paypal_client(fake_settings, http, clock) -> PayPalClient:
    """PayPalClient talking to FakePayPal with a manually advanced clock."""
    return PayPalClient(fake_settings, http=http, guard=TokenGuard(clock=clock))


@pytest.fixture
def mock_client():
    """MagicMock standing in for PayPalClient."""
    client = MagicMock()
    client.get = MagicMock()
    client.post = MagicMock()
    client.put = MagicMock()
    client.patch = MagicMock()
    client.delete = MagicMock()
    client.close = MagicMock()
    return client
