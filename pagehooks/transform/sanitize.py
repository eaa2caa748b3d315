"""Strips source positions from parsed trees and serializes the payload."""

import json
from typing import Any

from pagehooks.models import Payload, Resource

from .pipeline import Transform

KEYS_TO_REMOVE = frozenset({"position"})


def remove_position(node: Any) -> Any:
    """Delete every ``position`` key at any depth, in place.

    Expects a tree of dicts and lists; cycles are not handled.
    """
    if isinstance(node, dict):
        for key in list(node):
            if key in KEYS_TO_REMOVE:
                del node[key]
            else:
                remove_position(node[key])
    elif isinstance(node, list):
        for item in node:
            remove_position(item)
    return node


class AstSanitizer(Transform):
    """Drops the rendered body/html and strips positions from every tree.

    Trees may sit in mdast/htast, in ``children`` or in fields the pipeline
    does not know about.
    """

    def apply(self, resource: Resource) -> Resource:
        resource.body = None
        resource.html = None
        remove_position(resource.mdast)
        remove_position(resource.htast)
        remove_position(resource.children)
        remove_position(resource.nav)
        remove_position(resource.model_extra)
        return resource


def serialize_payload(payload: Payload) -> str:
    """JSON form of the payload: aliases, no None fields, no positions."""
    exclude: dict[str, Any] = {"serialized": True}
    if payload.resource is not None:
        exclude["resource"] = {"body": True, "html": True}
    data = payload.model_dump(
        mode="json", by_alias=True, exclude=exclude, exclude_none=True
    )
    return json.dumps(remove_position(data), ensure_ascii=False, separators=(",", ":"))


def sanitize_payload(payload: Payload) -> Payload:
    """Sanitize the resource and store the JSON form on ``payload.serialized``."""
    if payload.resource is not None:
        AstSanitizer().apply(payload.resource)
    payload.serialized = serialize_payload(payload)
    return payload
