"""
Blueprint Animation

Turns one authored animation into per-bone sample sequences mapped onto
the bone hierarchy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Sequence

from ..bone import BoneName, BoneTagRegistry
from ..config.settings import EFFECT_ANIMATOR_ID
from ..raw.model_data import AnimationType, ModelAnimation
from .animation_tree import AnimationTree
from .animator import AnimatorData, BlueprintAnimator, BlueprintAnimatorBuilder
from .script import BlueprintScript
from .timeline import AnimationPoint, breakpoints, merge_at

if TYPE_CHECKING:
    from ..core.hierarchy import BlueprintGroup

logger = logging.getLogger(__name__)


def empty_points(length: float) -> List[AnimationPoint]:
    """Two motionless points at 0 and length, kept apart even when length is 0."""
    return merge_at([0.0, float(length)], [], [], [])


class AnimationGenerator:
    """
    Cross-references merged bone data with the bone hierarchy.

    Builds one AnimationTree per root group and completes the bone map
    so every leaf of the hierarchy resolves to a sequence.
    """

    def __init__(self, point_map: Mapping[BoneName, AnimatorData], groups: Sequence["BlueprintGroup"]):
        """
        Initialize generator.

        Args:
            point_map: Merged samples keyed by bone name
            groups: Root groups of the hierarchy
        """
        self.point_map = dict(point_map)
        self.trees: List[AnimationTree] = [AnimationTree.new_root(self.point_map, group) for group in groups]

    def leaves(self) -> List[AnimationTree]:
        leaves = []
        for tree in self.trees:
            leaves.extend(tree.flatten_leaves())
        return leaves

    def timeline(self, length: float) -> List[float]:
        """Union of every authored bone's timestamps, plus 0 and length."""
        times = breakpoints(length)
        for data in self.point_map.values():
            times.extend(point.time for point in data.points)
        return sorted(set(times))

    def create_movements(self, length: float) -> Dict[BoneName, BlueprintAnimator]:
        """
        Build the bone -> animator map.

        Authored bones keep their merged sequence. When at least one bone
        is authored, leaves without data get motionless points sampled on
        the shared timeline so they stay in step with the rest.

        Args:
            length: Animation length in seconds

        Returns:
            Animators keyed by bone name (empty when nothing is authored)
        """
        animators = {
            name: BlueprintAnimator(data.name, name, list(data.points))
            for name, data in self.point_map.items()
        }
        if not animators:
            return animators

        times = None
        for leaf in self.leaves():
            if leaf.name in animators:
                continue
            if times is None:
                times = self.timeline(length)
            leaf.points = merge_at(times, [], [], [])
            animators[leaf.name] = BlueprintAnimator(leaf.name.raw_name, leaf.name, list(leaf.points))
        return animators


@dataclass
class BlueprintAnimation:
    """Playback-ready animation of a blueprint."""

    name: str
    loop_type: AnimationType
    length: float
    overriding: bool
    animators: Dict[BoneName, BlueprintAnimator] = field(default_factory=dict)
    script: Optional[BlueprintScript] = None
    empty_animator: List[AnimationPoint] = field(default_factory=list)
    trees: List[AnimationTree] = field(default_factory=list)

    @classmethod
    def from_model(
        cls,
        groups: Sequence["BlueprintGroup"],
        animation: ModelAnimation,
        registry: BoneTagRegistry,
    ) -> "BlueprintAnimation":
        """
        Build an animation from its authored definition.

        Args:
            groups: Root groups of the blueprint hierarchy
            animation: Authored animation
            registry: Registry used to parse animator names

        Returns:
            BlueprintAnimation instance
        """
        point_map: Dict[BoneName, AnimatorData] = {}
        script = None if animation.overriding else BlueprintScript.from_model(animation)

        for animator_id, animator in animation.animators.items():
            if animator.name is None:
                continue
            if animator_id == EFFECT_ANIMATOR_ID:
                script = BlueprintScript.from_model(animation, animator)
                continue

            builder = BlueprintAnimatorBuilder(animation.length)
            for keyframe in sorted(animator.keyframes, key=lambda k: k.time):
                builder.add_frame(keyframe)
            point_map[registry.parse(animator.name)] = builder.build(animator.name)

        generator = AnimationGenerator(point_map, groups)
        animators = generator.create_movements(animation.length)
        empty_animator = [] if animators else empty_points(animation.length)

        logger.debug(
            "Animation '%s': %d authored bones, %d animators",
            animation.name, len(point_map), len(animators),
        )

        return cls(
            name=animation.name,
            loop_type=animation.loop_type,
            length=animation.length,
            overriding=animation.overriding,
            animators=animators,
            script=script,
            empty_animator=empty_animator,
            trees=generator.trees,
        )

    def animator(self, raw_name: str) -> Optional[BlueprintAnimator]:
        """Find an animator by the bone's raw name."""
        for name, animator in self.animators.items():
            if name.raw_name == raw_name:
                return animator
        return None

    def __repr__(self):
        return (
            f"BlueprintAnimation(name='{self.name}', length={self.length:.2f}s, "
            f"animators={len(self.animators)}, loop={self.loop_type.value})"
        )
