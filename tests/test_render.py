"""Tests for pagehooks.render: markdown to resource fragments."""

from unittest.mock import patch

import pytest

from pagehooks.errors import RenderError
from pagehooks.render import render_markdown, split_fragments

from conftest import SAMPLE_SUMMARY, SAMPLE_SUMMARY_HTML


def test_render_summary_html():
    resource = render_markdown(SAMPLE_SUMMARY)
    assert resource.body == SAMPLE_SUMMARY
    assert resource.html == SAMPLE_SUMMARY_HTML


def test_render_splits_top_level_children():
    resource = render_markdown(SAMPLE_SUMMARY)
    assert resource.children == [
        "<h1>Table of contents</h1>",
        "\n",
        "<ul>\n<li>a</li>\n<li>b</li>\n<li><a href=\"link.md\">link</a></li>\n</ul>",
    ]


def test_render_empty_source():
    resource = render_markdown("")
    assert resource.html == ""
    assert resource.children == []


def test_split_fragments_keeps_whitespace_nodes():
    assert split_fragments("<p>a</p>\n<p>b</p>") == ["<p>a</p>", "\n", "<p>b</p>"]


def test_unknown_extension_raises_render_error():
    with pytest.raises(RenderError) as exc_info:
        render_markdown("# x", extensions=["no_such_extension_anywhere"])
    assert exc_info.value.operation == "initialization"


def test_conversion_failure_raises_render_error():
    with patch("pagehooks.render.markdown.Markdown.convert", side_effect=RuntimeError("boom")):
        with pytest.raises(RenderError) as exc_info:
            render_markdown("# x")
    assert exc_info.value.operation == "conversion"
    assert isinstance(exc_info.value.__cause__, RuntimeError)
