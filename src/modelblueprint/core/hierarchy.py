"""
Hierarchy

Bone groups of a blueprint, resolved from the model's outliner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Sequence, Union

from pyrr import Vector3

from ..bone import BoneName, BoneTagRegistry
from ..raw.model_data import ModelChildren, ModelElement, ModelGroup, ModelUUID


class BlueprintBuildError(RuntimeError):
    """Raised when a model document references data it does not contain."""


@dataclass
class BlueprintGroup:
    """Bone of the blueprint with its resolved children."""

    name: BoneName
    origin: Vector3
    rotation: Vector3
    uuid: str = ""
    children: List["BlueprintChildren"] = field(default_factory=list)

    def groups(self) -> Iterator["BlueprintGroup"]:
        """Direct child groups, skipping elements."""
        for child in self.children:
            if isinstance(child, BlueprintGroup):
                yield child

    def elements(self) -> Iterator[ModelElement]:
        """Direct child elements."""
        for child in self.children:
            if isinstance(child, ModelElement):
                yield child

    def iter_groups(self) -> Iterator["BlueprintGroup"]:
        """This group and every group below it, pre-order."""
        yield self
        for group in self.groups():
            yield from group.iter_groups()

    def __repr__(self):
        return f"BlueprintGroup(name='{self.name.raw_name}', children={len(self.children)})"


BlueprintChildren = Union[BlueprintGroup, ModelElement]


def resolve_children(
    children: Sequence[ModelChildren],
    elements: Mapping[str, ModelElement],
    registry: BoneTagRegistry,
) -> List[BlueprintChildren]:
    """
    Resolve outliner entries against the model's elements.

    Args:
        children: Outliner entries
        elements: Elements keyed by uuid
        registry: Registry used to parse group names

    Returns:
        Groups and elements in outliner order

    Raises:
        BlueprintBuildError: If an entry references an unknown element
    """
    resolved: List[BlueprintChildren] = []
    for child in children:
        if isinstance(child, ModelUUID):
            element = elements.get(child.uuid)
            if element is None:
                raise BlueprintBuildError(f"Outliner references unknown element '{child.uuid}'")
            resolved.append(element)
        elif isinstance(child, ModelGroup):
            resolved.append(BlueprintGroup(
                name=registry.parse(child.name),
                origin=child.origin,
                rotation=child.rotation,
                uuid=child.uuid,
                children=resolve_children(child.children, elements, registry),
            ))
        else:
            raise BlueprintBuildError(f"Unsupported outliner entry: {child!r}")
    return resolved


def root_groups(children: Sequence[BlueprintChildren]) -> List[BlueprintGroup]:
    return [child for child in children if isinstance(child, BlueprintGroup)]
