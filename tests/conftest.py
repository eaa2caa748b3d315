"""Shared test fixtures for pagehooks."""

import copy
import logging
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from pagehooks.config.models import PageHooksConfig, SecretsConfig

SAMPLE_COMMITS: list[dict[str, Any]] = [
    {
        "author": {"avatar_url": "a1"},
        "commit": {"author": {"name": "a1", "email": "e1", "date": "D1"}},
    },
    {
        "author": {"avatar_url": "a1"},
        "commit": {"author": {"name": "a1b", "email": "e1b", "date": "D0"}},
    },
]

SAMPLE_SUMMARY = "# Table of contents\n\n* a\n* b\n* [link](link.md)"

SAMPLE_SUMMARY_HTML = (
    "<h1>Table of contents</h1>\n"
    "<ul>\n<li>a</li>\n<li>b</li>\n<li><a href=\"link.md\">link</a></li>\n</ul>"
)


class FakeUpstream:
    """Stands in for the commit API and the raw content host."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.commits: Any = copy.deepcopy(SAMPLE_COMMITS)
        self.summary = SAMPLE_SUMMARY
        self.status: dict[str, int] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        status = self.status.get(path, 200)
        if status != 200:
            return httpx.Response(status, text="upstream error")
        if path.endswith("/commits"):
            return httpx.Response(200, json=self.commits)
        if path.endswith("/SUMMARY.md"):
            return httpx.Response(200, text=self.summary)
        return httpx.Response(404, text="not found")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
async def client(upstream):
    async with upstream.client() as c:
        yield c


@pytest.fixture
def sample_commits():
    return copy.deepcopy(SAMPLE_COMMITS)


@pytest.fixture
def sample_config():
    return PageHooksConfig()


@pytest.fixture
def configured():
    """Config with both upstream roots set."""
    return PageHooksConfig(
        secrets=SecretsConfig(
            repo_api_root="http://localhost/",
            repo_raw_root="http://raw.localhost/",
        )
    )


@pytest.fixture
def logger_mock():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def page_payload():
    return {
        "owner": "owner",
        "repo": "repo",
        "ref": "ref",
        "path": "resourcePath.md",
        "resource": {"children": ["<h1>Title</h1>", "\n", "<p>Body</p>"]},
    }
