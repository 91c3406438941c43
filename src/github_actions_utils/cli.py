"""Command-line interface: ``github-actions-utils-cli mcp``."""

from __future__ import annotations

import argparse
import logging
import sys

from github_actions_utils.config import load_settings
from github_actions_utils.errors import ConfigError

logger = logging.getLogger(__name__)

_MCP_HELP = """\
Runs an MCP server over stdin/stdout exposing these tools:
  - get_action_parameters: fetch and parse a GitHub Action's action.yml
  - get_readme: fetch a repository's README

Example MCP client configuration:
{
  "mcpServers": {
    "github-actions-utils": {
      "command": "github-actions-utils-cli",
      "args": ["mcp"]
    }
  }
}
"""


def build_parser() -> argparse.ArgumentParser:
    from github_actions_utils import __version__

    parser = argparse.ArgumentParser(
        prog="github-actions-utils-cli",
        description="MCP server for GitHub Actions utilities.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subcommands = parser.add_subparsers(dest="command")

    mcp_parser = subcommands.add_parser(
        "mcp",
        help="Run MCP server for agent integration",
        description=_MCP_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    mcp_parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level for stderr output (overrides GITHUB_ACTIONS_UTILS_LOG_LEVEL).",
    )
    return parser


def configure_logging(level: str) -> None:
    """Send logs to stderr; stdout carries the JSON-RPC stream."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(argv: list[str] | None = None) -> int:
    """Parse arguments and run the selected command. Returns an exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command != "mcp":
        parser.print_help()
        return 0

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    level = (args.log_level or settings.log_level).upper()
    if level not in logging.getLevelNamesMapping():
        print(f"Error: unknown log level '{args.log_level}'.", file=sys.stderr)
        return 2
    configure_logging(level)

    from github_actions_utils.server import mcp

    logger.info("Starting MCP server on stdio")
    mcp.run(transport="stdio")
    return 0
