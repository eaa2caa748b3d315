"""Derives the last-modified date of a resource from its newest commit."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Literal

import humanize

from pagehooks.models import LastModified, Resource
from pagehooks.vcs.models import as_commit_records

from .pipeline import Transform

DisplayStyle = Literal["relative", "absolute"]

UNKNOWN = "Unknown"


def parse_commit_date(value: str) -> datetime | None:
    """Parse ISO-8601 or RFC-2822 dates; naive values are taken as UTC."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        try:
            parsed = parsedate_to_datetime(value)
        except (TypeError, ValueError):
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _naive_utc(value: datetime) -> datetime:
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def relative_date(then: datetime, now: datetime) -> str:
    """'3 days ago' / '2 days from now' phrase for ``then`` seen from ``now``."""
    return humanize.naturaltime(_naive_utc(then), when=_naive_utc(now))


def format_commit_date(
    raw: str, style: DisplayStyle = "relative", now: datetime | None = None
) -> str:
    parsed = parse_commit_date(raw)
    if parsed is None:
        return raw
    if style == "absolute":
        return parsed.astimezone(timezone.utc).strftime("%a, %d %b %Y %H:%M:%S GMT")
    return relative_date(parsed, now or datetime.now(timezone.utc))


def extract_last_modified(
    commits: Iterable[Any] | None,
    style: DisplayStyle = "relative",
    now: datetime | None = None,
) -> LastModified:
    """Read the author date of the first (newest) commit."""
    records = as_commit_records(commits)
    raw = None
    if records and records[0].commit and records[0].commit.author:
        raw = records[0].commit.author.date

    if not raw:
        return LastModified(raw=raw, display=UNKNOWN)
    return LastModified(raw=raw, display=format_commit_date(raw, style, now))


class LastModifiedExtractor(Transform):
    def __init__(self, style: DisplayStyle = "relative", now: datetime | None = None):
        self.style = style
        self.now = now

    def apply(self, resource: Resource) -> Resource:
        resource.last_modified = extract_last_modified(
            resource.metadata, self.style, self.now
        )
        return resource
