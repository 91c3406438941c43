"""get_readme tool -- fetch a repository's README as text."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import Context

from github_actions_utils.errors import GitHubActionsUtilsError
from github_actions_utils.tools._helpers import error_result, get_context

logger = logging.getLogger(__name__)


async def get_readme(
    repo_ref: str,
    ctx: Context,
) -> dict[str, object]:
    """Fetch the README of a GitHub repository.

    Tries README.md, readme.md, Readme.md, README and readme on the given
    branch and returns the first one found.

    Args:
        repo_ref: Repository reference, optionally with a branch
            (e.g. "actions/checkout" or "actions/checkout@main").
            The branch defaults to "main".

    Returns:
        Dict with: repo_ref and readme (the raw Markdown/text content).
    """
    if not repo_ref.strip():
        return {"success": False, "error": "repo_ref is required.", "error_type": "ValueError"}

    try:
        app = get_context(ctx)
        readme = await app.actions.get_readme(repo_ref)
        return {
            "success": True,
            "repo_ref": repo_ref.strip(),
            "readme": readme,
        }

    except GitHubActionsUtilsError as exc:
        logger.warning("get_readme failed for %r: %s", repo_ref, exc)
        return error_result(exc)
    except Exception as exc:
        await ctx.error(f"Unexpected error in get_readme: {exc}")
        return {
            "success": False,
            "error": f"Internal error: {type(exc).__name__}",
            "error_type": "InternalError",
        }
