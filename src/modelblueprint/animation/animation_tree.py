"""
Animation Tree

Mirrors the bone hierarchy and attaches each bone's merged samples to
its node.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Iterator, List, Mapping, Optional

from ..bone import BoneName
from .animator import AnimatorData
from .timeline import AnimationPoint

if TYPE_CHECKING:
    from ..core.hierarchy import BlueprintGroup


class AnimationTree:
    """
    Node of the animation hierarchy.

    A node owns its children. The parent link is a weak reference, so it
    never keeps a detached subtree's ancestors alive.
    """

    def __init__(
        self,
        name: BoneName,
        points: Optional[List[AnimationPoint]] = None,
        parent: Optional["AnimationTree"] = None,
    ):
        """
        Initialize a node.

        Args:
            name: Bone this node stands for
            points: Merged samples of the bone (empty if unauthored)
            parent: Parent node (None for roots)
        """
        self.name = name
        self.points: List[AnimationPoint] = points if points is not None else []
        self.children: List[AnimationTree] = []
        self._parent = weakref.ref(parent) if parent is not None else None

    @classmethod
    def new_root(cls, point_map: Mapping[BoneName, AnimatorData], group: "BlueprintGroup") -> "AnimationTree":
        """
        Build the tree for one root group.

        Args:
            point_map: Merged samples keyed by bone name
            group: Root group of the hierarchy

        Returns:
            Root node; one node per group below it, elements are skipped
        """
        root = cls(group.name, _points_for(point_map, group.name))
        root._build_children(point_map, group)
        return root

    def _build_children(self, point_map: Mapping[BoneName, AnimatorData], group: "BlueprintGroup"):
        for sub_group in group.groups():
            child = AnimationTree(sub_group.name, _points_for(point_map, sub_group.name), parent=self)
            self.children.append(child)
            child._build_children(point_map, sub_group)

    @property
    def parent(self) -> Optional["AnimationTree"]:
        return self._parent() if self._parent is not None else None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def flatten_leaves(self) -> List["AnimationTree"]:
        """Childless nodes below (or equal to) this one, in traversal order."""
        if self.is_leaf:
            return [self]
        leaves = []
        for child in self.children:
            leaves.extend(child.flatten_leaves())
        return leaves

    def iter_nodes(self) -> Iterator["AnimationTree"]:
        """Every node of the subtree, pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_nodes()

    def __repr__(self):
        return f"AnimationTree(name='{self.name.raw_name}', points={len(self.points)}, children={len(self.children)})"


def _points_for(point_map: Mapping[BoneName, AnimatorData], name: BoneName) -> List[AnimationPoint]:
    data = point_map.get(name)
    return list(data.points) if data is not None else []
