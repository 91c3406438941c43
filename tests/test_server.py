"""Tests for server.py — composition root and lifespan."""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest

from github_actions_utils.errors import ConfigError
from github_actions_utils.github.actions import ActionsService
from github_actions_utils.server import app_lifespan, mcp


class TestAppLifespan:
    """Tests for the app_lifespan context manager."""

    async def test_creates_http_client_with_default_timeout(self):
        """Should create httpx.AsyncClient with 30s read / 10s connect timeout."""
        async with app_lifespan(MagicMock()) as ctx:
            client = ctx.http_client
            assert isinstance(client, httpx.AsyncClient)
            assert client.timeout.read == 30.0
            assert client.timeout.connect == 10.0

    async def test_timeout_comes_from_environment(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACTIONS_UTILS_TIMEOUT", "5")
        monkeypatch.setenv("GITHUB_ACTIONS_UTILS_CONNECT_TIMEOUT", "2.5")

        async with app_lifespan(MagicMock()) as ctx:
            assert ctx.http_client.timeout.read == 5.0
            assert ctx.http_client.timeout.connect == 2.5

    async def test_creates_http_client_with_follow_redirects(self):
        async with app_lifespan(MagicMock()) as ctx:
            assert ctx.http_client.follow_redirects is True

    async def test_no_auth_headers(self):
        async with app_lifespan(MagicMock()) as ctx:
            assert "authorization" not in ctx.http_client.headers

    async def test_wires_actions_service_to_shared_client(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACTIONS_UTILS_RAW_BASE_URL", "http://mirror.local/")

        async with app_lifespan(MagicMock()) as ctx:
            assert isinstance(ctx.actions, ActionsService)
            fetcher = ctx.actions._fetcher
            assert fetcher.http is ctx.http_client
            assert fetcher.base_url == "http://mirror.local"

    async def test_client_closed_after_lifespan(self):
        async with app_lifespan(MagicMock()) as ctx:
            client = ctx.http_client
            assert not client.is_closed

        assert client.is_closed

    async def test_invalid_config_fails_startup(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACTIONS_UTILS_TIMEOUT", "soon")

        with pytest.raises(ConfigError):
            async with app_lifespan(MagicMock()):
                pass


class TestToolRegistration:
    async def test_tools_registered_read_only(self):
        tools = {tool.name: tool for tool in await mcp.list_tools()}

        assert set(tools) == {"get_action_parameters", "get_readme"}
        for tool in tools.values():
            assert tool.annotations is not None
            assert tool.annotations.readOnlyHint is True

    async def test_tool_schemas_expose_single_string_argument(self):
        tools = {tool.name: tool for tool in await mcp.list_tools()}

        assert tools["get_action_parameters"].inputSchema["required"] == ["action_ref"]
        assert tools["get_readme"].inputSchema["required"] == ["repo_ref"]
