"""Pydantic models for commit history records.

The shape is owned by the commit history API, so every level is optional and
unknown keys are kept as-is.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter


class CommitAccount(BaseModel):
    """The platform account linked to a commit (``null`` for unknown users)."""

    model_config = ConfigDict(extra="allow")

    avatar_url: str | None = None
    login: str | None = None


class CommitSignature(BaseModel):
    """Git author or committer signature."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    email: str | None = None
    date: str | None = None


class CommitDetail(BaseModel):
    model_config = ConfigDict(extra="allow")

    author: CommitSignature | None = None
    committer: CommitSignature | None = None
    message: str | None = None


class CommitRecord(BaseModel):
    """One entry of ``GET repos/{owner}/{repo}/commits``."""

    model_config = ConfigDict(extra="allow")

    sha: str | None = None
    author: CommitAccount | None = None
    commit: CommitDetail | None = None


_COMMIT_LIST = TypeAdapter(list[CommitRecord])


def as_commit_records(commits: Iterable[Any] | None) -> list[CommitRecord]:
    """Validate raw API dicts (or existing records) into CommitRecord models."""
    if not commits:
        return []
    return _COMMIT_LIST.validate_python(list(commits))
