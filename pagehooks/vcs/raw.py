"""Raw file download from the repository content host."""

from __future__ import annotations

import logging

from pagehooks.vcs.base import RemoteSource

logger = logging.getLogger(__name__)


class RawContentFetcher(RemoteSource):
    """Downloads ``{root}{owner}/{repo}/{ref}/{path}`` as text."""

    def file_url(self, owner: str, repo: str, ref: str, path: str) -> str:
        return f"{self.root}{owner}/{repo}/{ref}/{path.lstrip('/')}"

    async def fetch_text(self, owner: str, repo: str, ref: str, path: str) -> str:
        url = self.file_url(owner, repo, ref, path)
        logger.debug("Fetching... %s", url)
        resp = await self._get(url)
        return resp.text
