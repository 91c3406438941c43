"""Port: raw file retrieval from a hosted repository."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class RawContentFetcherPort(Protocol):
    """Port for fetching raw files at a given ref path."""

    async def fetch_raw_file(
        self,
        owner: str,
        repo: str,
        path_prefix: str,
        filename: str,
    ) -> bytes:
        """Fetch a single file's raw bytes."""
        ...

    async def fetch_first_matching(
        self,
        owner: str,
        repo: str,
        path_prefix: str,
        candidates: Sequence[str],
    ) -> bytes:
        """Fetch the first candidate filename that exists, in order."""
        ...
