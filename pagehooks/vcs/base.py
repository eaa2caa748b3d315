"""Shared HTTP plumbing for the upstream repository endpoints."""

from __future__ import annotations

import httpx

from pagehooks.config.models import PageHooksConfig


def _ensure_trailing_slash(root: str) -> str:
    return root if root.endswith("/") else root + "/"


class RemoteSource:
    """Base class for endpoints rooted at a configurable URL.

    A caller-owned ``httpx.AsyncClient`` is reused when given; otherwise a
    short-lived client is opened per request.
    """

    def __init__(
        self,
        root: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
        user_agent: str = "pagehooks",
    ) -> None:
        if not root:
            raise ValueError("A root URL is required.")
        self.root = _ensure_trailing_slash(root)
        self.timeout = timeout
        self.user_agent = user_agent
        self._client = client

    @classmethod
    def from_config(
        cls,
        root: str,
        config: PageHooksConfig,
        client: httpx.AsyncClient | None = None,
    ):
        return cls(
            root,
            client=client,
            timeout=config.http.timeout,
            user_agent=config.http.user_agent,
        )

    async def _get(self, url: str, params: dict[str, str] | None = None) -> httpx.Response:
        headers = {"User-Agent": self.user_agent}
        if self._client is not None:
            resp = await self._client.get(
                url, params=params, headers=headers, timeout=self.timeout
            )
            resp.raise_for_status()
            return resp
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
            resp.raise_for_status()
            return resp
