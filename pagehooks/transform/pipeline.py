"""TransformPipeline: runs ordered transforms on a resource before rendering."""

from abc import ABC, abstractmethod

from pagehooks.models import Resource


class Transform(ABC):
    @abstractmethod
    def apply(self, resource: Resource) -> Resource:
        """Transform the resource in place and return it."""
        ...


class TransformPipeline:
    def __init__(self, transforms: list[Transform]):
        self.transforms = transforms

    def apply(self, resource: Resource) -> Resource:
        for t in self.transforms:
            resource = t.apply(resource)
        return resource
