"""Drops the document title (the first rendered child) from a resource."""

from collections.abc import Sequence
from typing import Any

from pagehooks.models import Resource

from .pipeline import Transform


def remove_first_title(children: Sequence[Any] | None) -> list[Any]:
    """Return children without index 0; empty or missing input gives []."""
    if not children:
        return []
    return list(children[1:])


class TitleStripper(Transform):
    def apply(self, resource: Resource) -> Resource:
        resource.children = remove_first_title(resource.children)
        return resource
