"""Helpers shared by the MCP tool handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp.server.fastmcp import Context

from github_actions_utils.errors import GitHubActionsUtilsError

if TYPE_CHECKING:
    from github_actions_utils.server import AppContext


def get_context(ctx: Context) -> AppContext:
    """Extract AppContext from FastMCP's lifespan context.

    Raises TypeError if the lifespan context is not an AppContext instance.
    This catches misconfiguration early with a clear error message.
    """
    from github_actions_utils.server import AppContext

    app = ctx.request_context.lifespan_context
    if not isinstance(app, AppContext):
        msg = (
            f"Expected AppContext in lifespan_context, got {type(app).__name__}. "
            "Is the server configured with app_lifespan?"
        )
        raise TypeError(msg)
    return app


def error_result(exc: GitHubActionsUtilsError) -> dict[str, object]:
    """Failure payload carrying the error kind so agents can branch on it."""
    return {"success": False, "error": str(exc), "error_type": type(exc).__name__}
