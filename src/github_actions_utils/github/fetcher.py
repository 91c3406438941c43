"""HTTP client for GitHub's raw-content origin.

URL shape: ``{base_url}/{owner}/{repo}/{path_prefix}/{filename}`` where
``path_prefix`` is ``refs/tags/<version>``, ``refs/heads/<branch>`` or a
commit SHA.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import httpx

from github_actions_utils.config import RAW_CONTENT_ORIGIN
from github_actions_utils.errors import (
    AllCandidatesFailedError,
    FetchError,
    NotFoundError,
    TransportError,
    UnexpectedStatusError,
)


def build_raw_url(
    owner: str,
    repo: str,
    path_prefix: str,
    filename: str,
    base_url: str = RAW_CONTENT_ORIGIN,
) -> str:
    """Join the origin and path segments. Segments are assumed URL-safe."""
    return "/".join((base_url.rstrip("/"), owner, repo, path_prefix, filename))


@dataclass
class RawContentFetcher:
    """Async client for raw files. Holds no state besides the client handle."""

    http: httpx.AsyncClient
    base_url: str = RAW_CONTENT_ORIGIN

    async def fetch_raw_file(
        self,
        owner: str,
        repo: str,
        path_prefix: str,
        filename: str,
    ) -> bytes:
        """Fetch one file and return its body.

        Raises:
            TransportError: The request never produced a response.
            NotFoundError: The origin answered 404.
            UnexpectedStatusError: Any other non-200 answer.
        """
        url = build_raw_url(owner, repo, path_prefix, filename, self.base_url)
        try:
            response = await self.http.get(url)
        except httpx.HTTPError as exc:
            reason = str(exc) or type(exc).__name__
            raise TransportError(filename=filename, url=url, reason=reason) from exc

        if response.status_code == 404:
            raise NotFoundError(filename=filename, url=url)
        if response.status_code != 200:
            raise UnexpectedStatusError(
                filename=filename,
                url=url,
                status_code=response.status_code,
            )
        return response.content

    async def fetch_first_matching(
        self,
        owner: str,
        repo: str,
        path_prefix: str,
        candidates: Sequence[str],
    ) -> bytes:
        """Try each candidate filename in order and return the first body.

        Any single-file failure moves on to the next name; a transient
        error on one name is not retried.

        Raises:
            AllCandidatesFailedError: Every candidate failed. Carries the
                last failure only.
            ValueError: ``candidates`` is empty.
        """
        if not candidates:
            raise ValueError("At least one candidate filename is required.")

        failures: list[FetchError] = []
        for filename in candidates:
            try:
                return await self.fetch_raw_file(owner, repo, path_prefix, filename)
            except FetchError as exc:
                failures.append(exc)

        raise AllCandidatesFailedError(
            owner=owner,
            repo=repo,
            path_prefix=path_prefix,
            candidates=candidates,
            last_error=failures[-1],
        )
