"""Parse ``owner/repo@version`` reference strings."""

from __future__ import annotations

from github_actions_utils.errors import (
    EmptyReferenceError,
    IncompleteReferenceError,
    MalformedReferenceError,
    MalformedRepoPathError,
    MissingVersionError,
)
from github_actions_utils.models import Reference

DEFAULT_BRANCH = "main"


def parse_reference(
    raw: str,
    require_version: bool,
    default_version: str = "",
) -> Reference:
    """Parse a GitHub reference string like ``owner/repo@version``.

    Surrounding whitespace (spaces, tabs, newlines) is stripped first.
    When ``require_version`` is False and no ``@version`` is present,
    ``default_version`` is used.

    Examples:
        - ``"actions/checkout@v5"`` -> actions / checkout / v5
        - ``"owner/repo"`` with default ``"main"`` -> owner / repo / main

    Raises:
        EmptyReferenceError: Blank input.
        MalformedReferenceError: More than one ``@``.
        MissingVersionError: No ``@`` while a version is required.
        MalformedRepoPathError: Repository path is not ``owner/repo``.
        IncompleteReferenceError: Owner, repo or version is empty.
    """
    ref = raw.strip()
    if not ref:
        raise EmptyReferenceError("Reference cannot be empty.", ref)

    separators = ref.count("@")
    if separators > 1:
        raise MalformedReferenceError(
            "Invalid reference format: expected 'owner/repo@version' or "
            f"'owner/repo', got '{ref}' (more than one '@').",
            ref,
        )
    if separators == 1:
        repo_path, version = ref.split("@")
    elif require_version:
        raise MissingVersionError(
            f"Invalid reference format: expected 'owner/repo@version', got '{ref}'.",
            ref,
        )
    else:
        repo_path, version = ref, default_version

    segments = repo_path.split("/")
    if len(segments) != 2:
        raise MalformedRepoPathError(
            f"Invalid repository path: expected 'owner/repo', got '{repo_path}'.",
            ref,
        )

    owner, repo = segments
    if not owner or not repo or not version:
        raise IncompleteReferenceError(
            f"Owner, repo, and version must all be non-empty, got '{ref}'.",
            ref,
        )

    return Reference(owner=owner, repo=repo, version=version)


def parse_action_ref(raw: str) -> Reference:
    """Parse an action reference; the ``@version`` part is mandatory."""
    return parse_reference(raw, require_version=True)


def parse_repo_ref(raw: str, default_version: str = DEFAULT_BRANCH) -> Reference:
    """Parse a repository reference; a missing version becomes ``default_version``."""
    return parse_reference(raw, require_version=False, default_version=default_version)
