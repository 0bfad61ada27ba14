from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

os.environ.setdefault("OFFER_RELAY_LOG_DIR", tempfile.mkdtemp(prefix="offer-relay-logs-"))
os.environ.setdefault("ENV_PATH", str(Path(tempfile.gettempdir()) / "offer-relay-missing.env"))

from offer_relay.utils import webhook_client  # noqa: E402


class DummyClient:
    """Stand-in for ``httpx.AsyncClient`` recording every POST."""

    def __init__(self, outcome: httpx.Response | Exception, calls: list[dict[str, Any]]):
        self._outcome = outcome
        self.calls = calls

    async def __aenter__(self) -> "DummyClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False

    async def post(self, url: str, *, headers: dict[str, str], json: Any) -> httpx.Response:
        self.calls.append({"url": url, "headers": headers, "json": json})
        if isinstance(self._outcome, Exception):
            raise self._outcome
        return self._outcome


@pytest.fixture(autouse=True)
def clear_webhook_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("N8N_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)


@pytest.fixture()
def webhook_calls() -> list[dict[str, Any]]:
    return []


@pytest.fixture()
def fake_webhook(
    monkeypatch: pytest.MonkeyPatch, webhook_calls: list[dict[str, Any]]
) -> Callable[[httpx.Response | Exception], list[dict[str, Any]]]:
    """Install a fake webhook outcome and return the list of recorded calls."""

    def install(outcome: httpx.Response | Exception) -> list[dict[str, Any]]:
        monkeypatch.setattr(
            webhook_client.httpx,
            "AsyncClient",
            lambda *args, **kwargs: DummyClient(outcome, webhook_calls),
        )
        return webhook_calls

    # Default: any unexpected outbound call fails loudly.
    install(AssertionError("unexpected webhook call"))
    return install


@pytest.fixture()
def valid_payload() -> dict[str, Any]:
    return {
        "candidateName": "Ada Lovelace",
        "candidateEmail": "ada@example.com",
        "position": "Senior Engineer",
        "department": "Platform",
        "startDate": "2026-11-02",
        "salary": 145000,
        "currency": "EUR",
        "employmentType": "full-time",
        "benefits": ["Health insurance", "Stock options"],
    }


_RealAsyncClient = httpx.AsyncClient


@pytest.fixture()
def routed_webhook(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[dict[str, Any]]]:
    """Serve webhook requests from ``handler`` through a real ``httpx.AsyncClient``.

    Returns the list of keyword arguments the relay built its client with.
    """

    client_kwargs: list[dict[str, Any]] = []

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> list[dict[str, Any]]:
        def factory(*args: Any, **kwargs: Any) -> httpx.AsyncClient:
            client_kwargs.append(kwargs)
            return _RealAsyncClient(*args, transport=httpx.MockTransport(handler), **kwargs)

        monkeypatch.setattr(webhook_client.httpx, "AsyncClient", factory)
        return client_kwargs

    return install
