"""Hook signature and sequential composition."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol

import httpx

from pagehooks.config.models import PageHooksConfig
from pagehooks.models import HookResult, Payload


class Hook(Protocol):
    def __call__(
        self,
        payload: Payload | Mapping[str, Any] | None,
        config: PageHooksConfig,
        logger: logging.Logger | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> Awaitable[HookResult]: ...


def as_payload(payload: Payload | Mapping[str, Any] | None) -> Payload:
    """Accept a Payload or a plain mapping (e.g. decoded JSON)."""
    if payload is None:
        return Payload()
    if isinstance(payload, Payload):
        return payload
    return Payload.model_validate(payload)


def chain(*hooks: Hook) -> Callable[..., Awaitable[HookResult]]:
    """Compose hooks into one that runs them in order.

    Config, logger and client are handed to every hook unchanged. The first
    error result stops the chain and is returned as-is.
    """

    async def _chained(
        payload: Payload | Mapping[str, Any] | None,
        config: PageHooksConfig,
        logger: logging.Logger | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> HookResult:
        result = HookResult.success(as_payload(payload))
        for hook in hooks:
            result = await hook(result.payload, config, logger, client=client)
            if not result.ok:
                break
        return result

    return _chained
