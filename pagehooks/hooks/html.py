"""html_pre: annotates a page resource before it is rendered to HTML."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from pagehooks.config.models import PageHooksConfig
from pagehooks.hooks.base import as_payload
from pagehooks.hooks.nav import collect_nav
from pagehooks.models import HookResult, Payload
from pagehooks.transform import (
    CommitterExtractor,
    LastModifiedExtractor,
    TitleStripper,
    TransformPipeline,
)
from pagehooks.transform.nav import normalize_context_path
from pagehooks.vcs.commits import collect_metadata

log = logging.getLogger(__name__)


async def html_pre(
    payload: Payload | Mapping[str, Any] | None,
    config: PageHooksConfig,
    logger: logging.Logger | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> HookResult:
    """Run the page steps in order.

    1. set the context path
    2. remove the first title
    3. fetch the commit history (skipped without REPO_API_ROOT)
    4. derive committers and last-modified
    5. fetch and rewrite the nav (skipped without REPO_RAW_ROOT)

    Any failure stops the remaining steps and is returned as an error result.
    """
    logger = logger or log
    try:
        p = as_payload(payload)
        logger.debug("html_pre - Requested path: %s", p.path)
        if p.resource is None:
            logger.debug("html_pre - Payload has no resource, nothing we can do")
            return HookResult.success(p)
        resource = p.resource

        logger.debug("html_pre - Setting context path")
        resource.context_path = normalize_context_path(config.context_path)

        logger.debug("html_pre - Removing first title")
        TitleStripper().apply(resource)

        logger.debug("html_pre - Collecting metadata")
        resource.metadata = await collect_metadata(p, config, client=client, logger=logger)

        logger.debug("html_pre - Extracting committers and last modified from metadata")
        TransformPipeline([
            CommitterExtractor(),
            LastModifiedExtractor(config.last_modified_style),
        ]).apply(resource)
        logger.debug("html_pre - Number of committers extracted: %d", len(resource.committers))

        if config.nav.enabled:
            resource.nav = await collect_nav(p, config, client=client, logger=logger)

        return HookResult.success(p)
    except Exception as e:
        logger.error("html_pre - Error while executing html_pre: %s", e, exc_info=True)
        return HookResult.failure(e)
