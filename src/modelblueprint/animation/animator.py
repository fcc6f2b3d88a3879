"""
Animator

Collects a bone's keyframes per channel and merges them into one
sample sequence.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

from pyrr import Vector3

from ..bone import BoneName
from ..core.math_utils import animation_to_display, to_block_scale, transform_to_display
from ..raw.model_data import AnimationType, KeyFrameChannel, ModelKeyFrame
from .interpolation import VectorPoint, find_interpolation
from .timeline import AnimationPoint, merge

_ONE = Vector3([1.0, 1.0, 1.0])


@dataclass
class AnimatorData:
    """Merged sample sequence of one bone, keyed by its raw name."""

    name: str
    points: List[AnimationPoint] = field(default_factory=list)

    def __repr__(self):
        return f"AnimatorData(name='{self.name}', points={len(self.points)})"


@dataclass
class BlueprintAnimator:
    """Playback-ready animator of one bone."""

    name: str
    bone_name: BoneName
    points: List[AnimationPoint] = field(default_factory=list)

    def iterator(self, loop_type: AnimationType) -> Iterator[AnimationPoint]:
        """
        Iterate the points the way ``loop_type`` plays them.

        PLAY_ONCE yields each point once. LOOP repeats forever, restarting
        at the second point because the first and last describe the same
        pose. HOLD_ON_LAST yields every point, then the last one forever.
        """
        return iterate_points(self.points, loop_type)

    def __repr__(self):
        return f"BlueprintAnimator(name='{self.name}', points={len(self.points)})"


def iterate_points(points: Sequence[AnimationPoint], loop_type: AnimationType) -> Iterator[AnimationPoint]:
    if not points:
        return iter(())
    if loop_type == AnimationType.LOOP:
        restart = points[1:] if len(points) > 1 else points
        return itertools.chain(points, itertools.cycle(restart))
    if loop_type == AnimationType.HOLD_ON_LAST:
        return itertools.chain(points, itertools.repeat(points[-1]))
    return iter(points)


def unique(points: Sequence[VectorPoint]) -> List[VectorPoint]:
    """Drop points whose time was already seen; the first one wins."""
    seen = set()
    result = []
    for point in points:
        if point.time in seen:
            continue
        seen.add(point.time)
        result.append(point)
    return result


class BlueprintAnimatorBuilder:
    """
    Accumulates keyframes of one bone per channel.

    Frames after the animation length are dropped. Positions are
    converted to blocks and display space, rotations to display space and
    scales to a zero-based delta.
    """

    def __init__(self, length: float):
        """
        Initialize builder.

        Args:
            length: Animation length in seconds
        """
        self.length = length
        self.position: List[VectorPoint] = []
        self.rotation: List[VectorPoint] = []
        self.scale: List[VectorPoint] = []

    def add_frame(self, keyframe: ModelKeyFrame) -> "BlueprintAnimatorBuilder":
        if keyframe.time > self.length:
            return self

        interpolation = find_interpolation(keyframe.interpolation)
        for data_point in keyframe.data_points:
            vector = data_point.to_vector()
            if keyframe.channel == KeyFrameChannel.POSITION:
                self.position.append(VectorPoint(
                    transform_to_display(to_block_scale(vector)), keyframe.time, interpolation
                ))
            elif keyframe.channel == KeyFrameChannel.ROTATION:
                self.rotation.append(VectorPoint(
                    animation_to_display(vector), keyframe.time, interpolation
                ))
            elif keyframe.channel == KeyFrameChannel.SCALE:
                self.scale.append(VectorPoint(
                    vector - _ONE, keyframe.time, interpolation
                ))
            # timeline/sound/particle channels carry no bone motion

        return self

    def build(self, name: str) -> AnimatorData:
        """Merge the collected channels into one sequence."""
        return AnimatorData(
            name=name,
            points=merge(
                self.length,
                _ordered(self.position),
                _ordered(self.rotation),
                _ordered(self.scale),
            ),
        )


def _ordered(points: Sequence[VectorPoint]) -> List[VectorPoint]:
    return sorted(unique(points), key=lambda point: point.time)
