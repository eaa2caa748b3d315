"""Commit history lookup for a single resource."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from pagehooks.config.models import PageHooksConfig
from pagehooks.errors import CommitHistoryError
from pagehooks.vcs.base import RemoteSource
from pagehooks.vcs.models import CommitRecord, as_commit_records

if TYPE_CHECKING:
    from pagehooks.models import Payload

logger = logging.getLogger(__name__)


class CommitHistoryFetcher(RemoteSource):
    """Lists the commits touching one path, newest first.

    Issues exactly one ``GET {root}repos/{owner}/{repo}/commits?path=&sha=``.
    HTTP errors propagate to the caller; there is no retry.
    """

    def commits_url(self, owner: str, repo: str) -> str:
        return f"{self.root}repos/{owner}/{repo}/commits"

    async def fetch(
        self, owner: str, repo: str, ref: str, path: str
    ) -> list[CommitRecord]:
        url = self.commits_url(owner, repo)
        logger.debug("Fetching... %s?path=%s&sha=%s", url, path, ref)
        resp = await self._get(url, params={"path": path, "sha": ref})

        try:
            data = resp.json()
        except ValueError as e:
            raise CommitHistoryError(str(resp.url), "body is not JSON") from e
        if not isinstance(data, list):
            raise CommitHistoryError(
                str(resp.url), f"expected a JSON array, got {type(data).__name__}"
            )
        return as_commit_records(data)


async def collect_metadata(
    payload: Payload,
    config: PageHooksConfig,
    *,
    client: httpx.AsyncClient | None = None,
    logger: logging.Logger = logger,
) -> list[CommitRecord] | None:
    """Fetch the commit history of ``payload.path``.

    Returns None when REPO_API_ROOT is not configured.
    """
    api_root = config.secrets.repo_api_root
    if not api_root:
        logger.debug("REPO_API_ROOT not set, skipping commit history")
        return None

    fetcher = CommitHistoryFetcher.from_config(api_root, config, client=client)
    commits = await fetcher.fetch(payload.owner, payload.repo, payload.ref, payload.path)
    logger.debug("Collected %d commits for %s", len(commits), payload.path)
    return commits
