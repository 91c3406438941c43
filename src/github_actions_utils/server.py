"""MCP server exposing GitHub Actions utilities over stdio."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from github_actions_utils.config import Settings, load_settings
from github_actions_utils.github.actions import ActionsService
from github_actions_utils.github.fetcher import RawContentFetcher
from github_actions_utils.tools.action_parameters import get_action_parameters
from github_actions_utils.tools.readme import get_readme


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations."""

    http_client: httpx.AsyncClient
    settings: Settings
    actions: ActionsService


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Client with an explicit request timeout and no auth headers."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout, connect=settings.connect_timeout),
        follow_redirects=True,
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
    )


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage shared adapter lifecycle — the composition root."""
    settings = load_settings()
    async with build_http_client(settings) as http_client:
        fetcher = RawContentFetcher(http_client, base_url=settings.raw_base_url)
        yield AppContext(
            http_client=http_client,
            settings=settings,
            actions=ActionsService(fetcher),
        )


mcp = FastMCP(
    "github-actions-utils",
    instructions=(
        "github-actions-utils fetches metadata about GitHub Actions and repositories.\n\n"
        "- **get_action_parameters** — Given an action reference with a tag "
        "(e.g. 'actions/checkout@v5'), returns the full action.yml: inputs, "
        "outputs, runs configuration and metadata. Use it before writing a "
        "workflow step to learn which inputs an action accepts.\n"
        "- **get_readme** — Given 'owner/repo' or 'owner/repo@branch' "
        "(branch defaults to 'main'), returns the repository README text.\n\n"
        "Only public repositories are supported. On failure the result has "
        "success=False with an error message and error_type."
    ),
    lifespan=app_lifespan,
)

mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(get_action_parameters)
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(get_readme)
