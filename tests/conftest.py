"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

ResponseMap = dict[str, httpx.Response | Exception]


def make_http_client(responses: ResponseMap) -> AsyncMock:
    """Mock AsyncClient answering by exact URL; unknown URLs get 404."""

    def _get(url: str, *args: object, **kwargs: object) -> httpx.Response:
        outcome = responses.get(url, httpx.Response(404))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    client = AsyncMock(spec=httpx.AsyncClient)
    client.get = AsyncMock(side_effect=_get)
    return client


@pytest.fixture
def http_client_factory() -> Callable[[ResponseMap], AsyncMock]:
    return make_http_client


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer GITHUB_ACTIONS_UTILS_* variables out of the tests."""
    for name in ("RAW_BASE_URL", "TIMEOUT", "CONNECT_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"GITHUB_ACTIONS_UTILS_{name}", raising=False)
