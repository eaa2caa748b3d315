"""Upstream repository endpoints for pagehooks."""

from pagehooks.vcs.base import RemoteSource
from pagehooks.vcs.commits import CommitHistoryFetcher, collect_metadata
from pagehooks.vcs.models import (
    CommitAccount,
    CommitDetail,
    CommitRecord,
    CommitSignature,
    as_commit_records,
)
from pagehooks.vcs.raw import RawContentFetcher

__all__ = [
    "CommitAccount",
    "CommitDetail",
    "CommitHistoryFetcher",
    "CommitRecord",
    "CommitSignature",
    "RawContentFetcher",
    "RemoteSource",
    "as_commit_records",
    "collect_metadata",
]
