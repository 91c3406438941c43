"""Exception hierarchy for github-actions-utils.

All exceptions inherit from GitHubActionsUtilsError (single catch point).
Messages are written for LLM consumption -- clear, actionable, no stack traces.
"""

from __future__ import annotations

from collections.abc import Sequence


class GitHubActionsUtilsError(Exception):
    """Base exception for all github-actions-utils errors."""


class ConfigError(GitHubActionsUtilsError):
    """Invalid configuration value in the environment."""


# ─── Reference parsing ────────────────────────────────────────


class ReferenceParseError(GitHubActionsUtilsError):
    """A reference string could not be parsed into owner/repo/version."""

    def __init__(self, message: str, reference: str) -> None:
        super().__init__(message)
        self.reference = reference


class EmptyReferenceError(ReferenceParseError):
    """The reference is empty or whitespace only."""


class MissingVersionError(ReferenceParseError):
    """An '@version' suffix is required but absent."""


class MalformedReferenceError(ReferenceParseError):
    """More than one '@' separator."""


class MalformedRepoPathError(ReferenceParseError):
    """The repository path is not exactly 'owner/repo'."""


class IncompleteReferenceError(ReferenceParseError):
    """Owner, repo or version is empty."""


# ─── Fetching ─────────────────────────────────────────────────


class FetchError(GitHubActionsUtilsError):
    """A single raw file could not be fetched."""

    def __init__(self, message: str, *, filename: str, url: str) -> None:
        super().__init__(message)
        self.filename = filename
        self.url = url


class NotFoundError(FetchError):
    """The raw-content origin answered 404."""

    def __init__(self, *, filename: str, url: str) -> None:
        super().__init__(
            f"{filename} not found at {url} (status: 404)",
            filename=filename,
            url=url,
        )


class UnexpectedStatusError(FetchError):
    """The raw-content origin answered with a non-200, non-404 status."""

    def __init__(self, *, filename: str, url: str, status_code: int) -> None:
        super().__init__(
            f"Failed to fetch {filename} from {url} (status: {status_code})",
            filename=filename,
            url=url,
        )
        self.status_code = status_code


class TransportError(FetchError):
    """DNS, connection, TLS or timeout failure. The cause is chained."""

    def __init__(self, *, filename: str, url: str, reason: str) -> None:
        super().__init__(
            f"Failed to fetch {filename} from {url}: {reason}",
            filename=filename,
            url=url,
        )


class AllCandidatesFailedError(GitHubActionsUtilsError):
    """Every candidate filename failed; keeps only the last failure."""

    def __init__(
        self,
        *,
        owner: str,
        repo: str,
        path_prefix: str,
        candidates: Sequence[str],
        last_error: FetchError,
    ) -> None:
        tried = ", ".join(candidates)
        super().__init__(
            f"None of [{tried}] could be fetched for {owner}/{repo} at {path_prefix}. "
            f"Last error: {last_error}. "
            "Verify the reference, version and that the repository is public."
        )
        self.owner = owner
        self.repo = repo
        self.path_prefix = path_prefix
        self.candidates = tuple(candidates)
        self.last_error = last_error


class DescriptorDecodeError(GitHubActionsUtilsError):
    """A fetched action descriptor is not a valid YAML mapping."""
