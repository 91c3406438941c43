"""get_action_parameters tool -- fetch and decode a GitHub Action's action.yml."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import Context

from github_actions_utils.errors import GitHubActionsUtilsError
from github_actions_utils.github.actions import summarize_action
from github_actions_utils.tools._helpers import error_result, get_context

logger = logging.getLogger(__name__)


async def get_action_parameters(
    action_ref: str,
    ctx: Context,
) -> dict[str, object]:
    """Fetch and parse a GitHub Action's action.yml file.

    Returns the complete action.yml structure including inputs, outputs,
    runs configuration, and metadata. The version is resolved as a
    release tag; ``action.yml`` is tried first, then ``action.yaml``.

    Args:
        action_ref: GitHub Action reference with a tag
            (e.g. "actions/checkout@v5").

    Returns:
        Dict with: summary (name, description, input/output counts as
        text) and action (the full decoded action.yml).
    """
    if not action_ref.strip():
        return {"success": False, "error": "action_ref is required.", "error_type": "ValueError"}

    try:
        app = get_context(ctx)
        params = await app.actions.get_action_parameters(action_ref)
        return {
            "success": True,
            "action_ref": action_ref.strip(),
            "summary": summarize_action(action_ref.strip(), params),
            "action": params,
        }

    except GitHubActionsUtilsError as exc:
        logger.warning("get_action_parameters failed for %r: %s", action_ref, exc)
        return error_result(exc)
    except Exception as exc:
        await ctx.error(f"Unexpected error in get_action_parameters: {exc}")
        return {
            "success": False,
            "error": f"Internal error: {type(exc).__name__}",
            "error_type": "InternalError",
        }
