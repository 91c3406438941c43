"""Fetch and decode GitHub Action descriptors and repository READMEs."""

from __future__ import annotations

import datetime as dt
import json
import logging

import yaml

from github_actions_utils.errors import DescriptorDecodeError
from github_actions_utils.github.base import RawContentFetcherPort
from github_actions_utils.github.ref import parse_action_ref, parse_repo_ref
from github_actions_utils.models import RefKind

logger = logging.getLogger(__name__)

ACTION_FILENAMES: tuple[str, ...] = ("action.yml", "action.yaml")
README_FILENAMES: tuple[str, ...] = ("README.md", "readme.md", "Readme.md", "README", "readme")


class ActionsService:
    """Resolves references and retrieves action metadata and docs."""

    def __init__(self, fetcher: RawContentFetcherPort) -> None:
        self._fetcher = fetcher

    async def get_action_parameters(self, action_ref: str) -> dict[str, object]:
        """Fetch and decode the ``action.yml`` of ``owner/repo@tag``.

        ``action.yml`` is tried before ``action.yaml``; the version is
        resolved as a tag.

        Raises:
            ReferenceParseError: Invalid ``action_ref``.
            AllCandidatesFailedError: Neither descriptor name could be fetched.
            DescriptorDecodeError: The fetched body is not a YAML mapping.
        """
        ref = parse_action_ref(action_ref)
        data = await self._fetcher.fetch_first_matching(
            ref.owner,
            ref.repo,
            RefKind.TAG.path_prefix(ref.version),
            ACTION_FILENAMES,
        )
        logger.debug(
            "Fetched action descriptor for %s at tag %s (%d bytes)",
            ref.repo_path,
            ref.version,
            len(data),
        )
        return parse_action_yaml(data)

    async def get_action_parameters_json(self, action_ref: str) -> str:
        """Same as get_action_parameters, rendered as indented JSON."""
        params = await self.get_action_parameters(action_ref)
        return json.dumps(params, indent=2)

    async def get_readme(self, repo_ref: str) -> str:
        """Fetch the README of ``owner/repo[@branch]`` as text.

        The branch defaults to ``main``. Filenames are tried in the order
        of README_FILENAMES.
        """
        ref = parse_repo_ref(repo_ref)
        data = await self._fetcher.fetch_first_matching(
            ref.owner,
            ref.repo,
            RefKind.BRANCH.path_prefix(ref.version),
            README_FILENAMES,
        )
        logger.debug(
            "Fetched README for %s at branch %s (%d bytes)",
            ref.repo_path,
            ref.version,
            len(data),
        )
        return data.decode("utf-8", errors="replace")


def parse_action_yaml(data: bytes | str) -> dict[str, object]:
    """Decode an action descriptor into a JSON-compatible mapping.

    Raises:
        DescriptorDecodeError: Invalid YAML, or the top level is not a mapping.
    """
    try:
        loaded = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise DescriptorDecodeError(f"Failed to parse YAML: {exc}") from exc

    if not isinstance(loaded, dict):
        kind = "empty document" if loaded is None else type(loaded).__name__
        raise DescriptorDecodeError(
            f"Invalid action descriptor: expected a YAML mapping, got {kind}."
        )
    return {_json_key(k): _json_compatible(v) for k, v in loaded.items()}


def _json_compatible(value: object) -> object:
    """Normalize YAML-decoded values so json.dumps accepts them."""
    if isinstance(value, dict):
        return {_json_key(k): _json_compatible(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_compatible(v) for v in value]
    if isinstance(value, dt.date):
        return value.isoformat()
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def _json_key(key: object) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def summarize_action(action_ref: str, params: dict[str, object]) -> str:
    """Short human-readable summary of a decoded descriptor."""
    lines = [f"Action: {action_ref}", ""]

    name = params.get("name")
    if isinstance(name, str):
        lines.append(f"Name: {name}")
    description = params.get("description")
    if isinstance(description, str):
        lines.append(f"Description: {description}")

    inputs = params.get("inputs")
    if isinstance(inputs, dict):
        lines.extend(["", f"Inputs: {len(inputs)} defined"])
    outputs = params.get("outputs")
    if isinstance(outputs, dict):
        lines.append(f"Outputs: {len(outputs)} defined")

    lines.extend(["", "Full action.yml structure returned in structured data."])
    return "\n".join(lines)
