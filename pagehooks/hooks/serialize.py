"""json_pre: prepares a resource for JSON output."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from pagehooks.config.models import PageHooksConfig
from pagehooks.hooks.base import as_payload
from pagehooks.models import HookResult, Payload
from pagehooks.transform import sanitize_payload

log = logging.getLogger(__name__)


async def json_pre(
    payload: Payload | Mapping[str, Any] | None,
    config: PageHooksConfig,
    logger: logging.Logger | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> HookResult:
    logger = logger or log
    try:
        p = sanitize_payload(as_payload(payload))
        logger.debug("json_pre - Serialized payload (%d chars)", len(p.serialized or ""))
        return HookResult.success(p)
    except Exception as e:
        logger.error("json_pre - Error while executing json_pre: %s", e, exc_info=True)
        return HookResult.failure(e)
