"""Pre-processing hook entry points."""

from pagehooks.hooks.base import Hook, as_payload, chain
from pagehooks.hooks.html import html_pre
from pagehooks.hooks.serialize import json_pre
from pagehooks.hooks.nav import collect_nav, fetch_nav, nav_pre, summary_html_pre

HOOKS: dict[str, Hook] = {
    "html": html_pre,
    "json": json_pre,
    "nav": nav_pre,
    "summary_html": summary_html_pre,
}


def get_hook(name: str) -> Hook:
    hook = HOOKS.get(name)
    if hook is None:
        raise ValueError(
            f"Unknown hook: {name!r}. Available: {', '.join(sorted(HOOKS))}"
        )
    return hook


__all__ = [
    "HOOKS",
    "Hook",
    "as_payload",
    "chain",
    "collect_nav",
    "fetch_nav",
    "get_hook",
    "html_pre",
    "json_pre",
    "nav_pre",
    "summary_html_pre",
]
