"""Markdown rendering used for sub-resources such as SUMMARY.md."""

from __future__ import annotations

import logging

import markdown
from bs4 import BeautifulSoup

from pagehooks.errors import RenderError
from pagehooks.models import Resource

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: list[str] = ["extra", "sane_lists"]


def split_fragments(html: str) -> list[str]:
    """Split rendered HTML into its top-level nodes, whitespace included."""
    soup = BeautifulSoup(html, "html.parser")
    return [str(node) for node in soup.contents]


def render_markdown(source: str, extensions: list[str] | None = None) -> Resource:
    """Render markdown into a Resource carrying body, html and children."""
    if extensions is None:
        extensions = DEFAULT_EXTENSIONS
    try:
        md = markdown.Markdown(extensions=extensions)
    except Exception as exc:
        raise RenderError("initialization", exc) from exc

    try:
        html = md.convert(source)
    except Exception as exc:
        raise RenderError("conversion", exc) from exc

    children = split_fragments(html)
    logger.debug("Rendered %d chars into %d fragments", len(source), len(children))
    return Resource(body=source, html=html, children=children)
