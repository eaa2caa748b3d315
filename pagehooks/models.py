"""Pydantic models for the payload passed between hooks."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pagehooks.vcs.models import CommitRecord


class Committer(BaseModel):
    """A contributor derived from commit history, unique by avatar URL."""

    avatar_url: str | None = None
    display: str


class LastModified(BaseModel):
    raw: str | None = None
    display: str = "Unknown"


class Resource(BaseModel):
    """In-memory representation of one rendered content page.

    ``children`` holds the top-level fragments (HTML strings or AST nodes)
    produced by the upstream renderer. Fields the pipeline does not know
    about are kept so they survive serialization.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    body: str | None = None
    html: str | None = None
    children: list[Any] = Field(default_factory=list)
    mdast: dict[str, Any] | None = None
    htast: dict[str, Any] | None = None
    metadata: list[CommitRecord] | None = None
    committers: list[Committer] = Field(default_factory=list)
    last_modified: LastModified | None = Field(default=None, alias="lastModified")
    nav: list[Any] = Field(default_factory=list)
    context_path: str | None = Field(default=None, alias="contextPath")

    @field_validator("children", "nav", "committers", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Payload(BaseModel):
    """Request envelope handed to every hook."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    owner: str | None = None
    repo: str | None = None
    ref: str | None = None
    path: str | None = None
    strain: str | None = None
    resource: Resource | None = None
    serialized: str | None = Field(default=None, alias="json")


class HookResult(BaseModel):
    """Outcome of a hook: the updated payload, or the error that stopped it."""

    payload: Payload | None = None
    error: str | None = None
    error_type: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, payload: Payload) -> HookResult:
        return cls(payload=payload)

    @classmethod
    def failure(cls, exc: BaseException) -> HookResult:
        return cls(error=str(exc) or repr(exc), error_type=type(exc).__name__)
