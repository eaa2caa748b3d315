"""Navigation hooks: fetch SUMMARY.md and rewrite its links."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from pagehooks.config.models import PageHooksConfig
from pagehooks.errors import NavFetchError
from pagehooks.hooks.base import as_payload
from pagehooks.models import HookResult, Payload, Resource
from pagehooks.render import render_markdown
from pagehooks.transform import NavRewriter, TitleStripper, TransformPipeline, filter_nav
from pagehooks.transform.nav import folder_context_path, normalize_context_path
from pagehooks.vcs.raw import RawContentFetcher

log = logging.getLogger(__name__)


async def fetch_nav(
    payload: Payload,
    config: PageHooksConfig,
    *,
    client: httpx.AsyncClient | None = None,
    logger: logging.Logger | None = None,
) -> Resource | None:
    """Download SUMMARY.md for the payload's repo/ref and render it.

    Returns None when REPO_RAW_ROOT is not configured.
    """
    logger = logger or log
    raw_root = config.secrets.repo_raw_root
    if not raw_root:
        logger.debug("REPO_RAW_ROOT not set, skipping nav")
        return None

    summary_path = config.nav.summary_path
    fetcher = RawContentFetcher.from_config(raw_root, config, client=client)
    try:
        source = await fetcher.fetch_text(payload.owner, payload.repo, payload.ref, summary_path)
    except httpx.HTTPStatusError as e:
        raise NavFetchError(
            f"Could not fetch {summary_path}: HTTP {e.response.status_code}"
        ) from e
    return render_markdown(source)


async def collect_nav(
    payload: Payload,
    config: PageHooksConfig,
    *,
    client: httpx.AsyncClient | None = None,
    logger: logging.Logger | None = None,
) -> list[Any]:
    """Fetched nav fragments, title removed and links made site-relative."""
    logger = logger or log
    logger.debug("Collecting the nav")
    nav_resource = await fetch_nav(payload, config, client=client, logger=logger)
    if nav_resource is None:
        return []

    context_path = config.context_path
    if payload.resource is not None and payload.resource.context_path:
        context_path = payload.resource.context_path
    return filter_nav(nav_resource.children, context_path, logger)


async def nav_pre(
    payload: Payload | Mapping[str, Any] | None,
    config: PageHooksConfig,
    logger: logging.Logger | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> HookResult:
    """Prepare a rendered nav resource served under a strain.

    Links are prefixed with ``/{strain}/`` and point to ``.html`` pages.
    """
    logger = logger or log
    try:
        p = as_payload(payload)
        if p.resource is None:
            p.resource = Resource()

        p.resource.context_path = normalize_context_path(p.strain)
        logger.debug("nav_pre - Context path: %s", p.resource.context_path)
        TransformPipeline([TitleStripper(), NavRewriter()]).apply(p.resource)
        return HookResult.success(p)
    except Exception as e:
        logger.error("nav_pre - Error while executing nav_pre: %s", e, exc_info=True)
        return HookResult.failure(e)


async def summary_html_pre(
    payload: Payload | Mapping[str, Any] | None,
    config: PageHooksConfig,
    logger: logging.Logger | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> HookResult:
    """Rewrite a rendered SUMMARY.md relative to the folder it was requested from."""
    logger = logger or log
    try:
        p = as_payload(payload)
        logger.debug("summary_html_pre - Requested path: %s", p.path)
        if p.resource is None:
            logger.debug("summary_html_pre - Payload has no resource, nothing we can do")
            return HookResult.success(p)

        p.resource.children = filter_nav(
            p.resource.children, folder_context_path(p.path), logger
        )
        return HookResult.success(p)
    except Exception as e:
        logger.error(
            "summary_html_pre - Error while executing summary_html_pre: %s", e, exc_info=True
        )
        return HookResult.failure(e)
