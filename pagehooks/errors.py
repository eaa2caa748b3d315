"""Exception types raised by pagehooks."""

from __future__ import annotations


class PageHooksError(Exception):
    """Base class for errors raised while running a hook."""


class CommitHistoryError(PageHooksError):
    """The commit history API answered with something other than a commit list."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Unexpected commit history from {url}: {reason}")


class NavFetchError(PageHooksError):
    """SUMMARY.md could not be fetched or rendered."""


class RenderError(PageHooksError):
    """Wraps failures of the markdown renderer with context."""

    def __init__(self, operation: str, cause: Exception) -> None:
        self.operation = operation
        super().__init__(f"markdown {operation} failed: {cause}")
        self.__cause__ = cause
