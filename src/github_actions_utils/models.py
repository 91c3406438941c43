"""Domain models for github-actions-utils. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RefKind(StrEnum):
    """How a version is resolved on the raw-content origin."""

    TAG = "tags"
    BRANCH = "heads"

    def path_prefix(self, version: str) -> str:
        return f"refs/{self.value}/{version}"


@dataclass(frozen=True, slots=True)
class Reference:
    """A parsed ``owner/repo@version`` reference.

    ``version`` is opaque: a tag, branch name or commit SHA.
    """

    owner: str
    repo: str
    version: str

    @property
    def repo_path(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}@{self.version}"
