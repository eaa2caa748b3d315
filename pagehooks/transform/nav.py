"""Rewrites markdown links in rendered nav fragments to site-relative .html links."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

from pagehooks.models import Resource

from .pipeline import Transform
from .title import remove_first_title

logger = logging.getLogger(__name__)

# href="<path>.md" or href="<path>.md#anchor", skipping anything with a scheme
# (http://, https://, mailto:, ...).
_MD_HREF_RE = re.compile(
    r'href="(?![a-zA-Z][a-zA-Z0-9+.-]*:)/?([^"#]*?)\.md(#[^"]*)?"'
)


def normalize_context_path(context_path: str | None) -> str:
    """Force a leading and a trailing slash: 'docs' -> '/docs/', None -> '/'."""
    stripped = (context_path or "").strip("/")
    return f"/{stripped}/" if stripped else "/"


def folder_context_path(path: str | None) -> str:
    """Context path of the folder holding ``path``: '/docs/SUMMARY.md' -> '/docs/'."""
    if not path or "/" not in path:
        return "/"
    return normalize_context_path(path[: path.rindex("/")])


def rewrite_links(children: Sequence[Any] | None, context_path: str | None) -> list[Any]:
    """Rewrite relative ``.md`` hrefs in string children; other children pass through."""
    prefix = normalize_context_path(context_path)

    def _rewrite(m: re.Match) -> str:
        return f'href="{prefix}{m.group(1)}.html{m.group(2) or ""}"'

    return [
        _MD_HREF_RE.sub(_rewrite, child) if isinstance(child, str) else child
        for child in children or []
    ]


def filter_nav(
    children: Sequence[Any] | None,
    context_path: str | None,
    logger: logging.Logger = logger,
) -> list[Any]:
    """Drop the nav title and rewrite the remaining fragments' links."""
    logger.debug("Extracting nav")
    if not children:
        logger.debug("Navigation payload has no children")
        return []

    nav = rewrite_links(remove_first_title(children), context_path)
    logger.debug("Managed to collect some content for the nav: %d", len(nav))
    return nav


class NavRewriter(Transform):
    """Rewrites the links of ``resource.children``.

    Uses the given context path, falling back to ``resource.context_path``.
    """

    def __init__(self, context_path: str | None = None):
        self.context_path = context_path

    def apply(self, resource: Resource) -> Resource:
        resource.children = rewrite_links(
            resource.children, self.context_path or resource.context_path
        )
        return resource
