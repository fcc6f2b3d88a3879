"""
Model Blueprint

Fully resolved, playback-ready model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ..animation import BlueprintAnimation
from ..core.hierarchy import BlueprintChildren, BlueprintGroup, root_groups
from ..raw.model_data import ModelResolution
from .texture import BlueprintTexture


@dataclass
class ModelBlueprint:
    """
    Blueprint built from a model document.

    Holds the resolved bone hierarchy, decoded textures and every
    animation keyed by name.
    """

    name: str
    scale: float
    resolution: ModelResolution
    textures: List[BlueprintTexture] = field(default_factory=list)
    group: List[BlueprintChildren] = field(default_factory=list)
    animations: Dict[str, BlueprintAnimation] = field(default_factory=dict)

    @property
    def groups(self) -> List[BlueprintGroup]:
        """Root groups of the hierarchy."""
        return root_groups(self.group)

    def iter_groups(self) -> Iterator[BlueprintGroup]:
        """Every group of the hierarchy, pre-order."""
        for root in self.groups:
            yield from root.iter_groups()

    def get_animation(self, name: str) -> Optional[BlueprintAnimation]:
        return self.animations.get(name)

    def __repr__(self):
        return (
            f"ModelBlueprint(name='{self.name}', bones={sum(1 for _ in self.iter_groups())}, "
            f"textures={len(self.textures)}, animations={len(self.animations)})"
        )
