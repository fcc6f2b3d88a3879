"""
Interpolation

Vector samples and the strategies used to interpolate between them.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

import numpy as np
from pyrr import Vector3

from ..config.settings import DEFAULT_INTERPOLATION
from ..core.math_utils import lerp, zero

logger = logging.getLogger(__name__)


class VectorInterpolation(ABC):
    """
    Strategy computing a sample between two authored points.

    A point's strategy is the one used to interpolate *into* it from the
    point before it.
    """

    name: str = ""

    @abstractmethod
    def interpolate(self, points: Sequence["VectorPoint"], next_index: int, time: float) -> "VectorPoint":
        """
        Sample the channel at ``time``.

        Args:
            points: Authored points of the channel, ascending in time
            next_index: Index of the first authored point at or after ``time``
            time: Query time in seconds

        Returns:
            New VectorPoint at ``time``
        """

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


@dataclass(frozen=True, eq=False)
class VectorPoint:
    """3-vector sample of one channel at a point in time."""

    vector: Vector3
    time: float
    interpolation: VectorInterpolation

    @classmethod
    def empty(cls) -> "VectorPoint":
        """Zero vector at t=0 using the default strategy."""
        return cls(zero(), 0.0, default_interpolation())

    def __eq__(self, other):
        if not isinstance(other, VectorPoint):
            return NotImplemented
        return (
            self.time == other.time
            and self.interpolation == other.interpolation
            and bool(np.array_equal(np.asarray(self.vector), np.asarray(other.vector)))
        )

    def __hash__(self):
        return hash((self.time, tuple(float(v) for v in self.vector), self.interpolation))

    def __repr__(self):
        x, y, z = (float(v) for v in self.vector)
        return f"VectorPoint(t={self.time:.3f}, v=({x:.3f}, {y:.3f}, {z:.3f}))"


def _previous(points: Sequence[VectorPoint], next_index: int) -> VectorPoint:
    if next_index > 0:
        return points[next_index - 1]
    return VectorPoint.empty()


class LinearInterpolation(VectorInterpolation):
    """Straight line between the previous and next points."""

    name = "linear"

    def interpolate(self, points, next_index, time):
        p1 = _previous(points, next_index)
        p2 = points[next_index]
        span = p2.time - p1.time
        if span == 0.0:
            # Two samples share a timestamp: the later one wins
            return VectorPoint(p2.vector.copy(), time, self)
        t = (time - p1.time) / span
        return VectorPoint(lerp(p1.vector, p2.vector, t), time, self)


class StepInterpolation(VectorInterpolation):
    """Holds the previous value until the next point is reached."""

    name = "step"

    def interpolate(self, points, next_index, time):
        p2 = points[next_index]
        if time >= p2.time:
            return VectorPoint(p2.vector.copy(), time, self)
        return VectorPoint(_previous(points, next_index).vector.copy(), time, self)


_LINEAR = LinearInterpolation()

INTERPOLATIONS: Dict[str, VectorInterpolation] = {
    _LINEAR.name: _LINEAR,
    StepInterpolation.name: StepInterpolation(),
}

_warned_names = set()
_warned_lock = threading.Lock()


def default_interpolation() -> VectorInterpolation:
    return INTERPOLATIONS[DEFAULT_INTERPOLATION]


def find_interpolation(name: Optional[str]) -> VectorInterpolation:
    """
    Resolve an interpolation strategy from the name a keyframe declares.

    Missing names resolve to the default strategy. Names without a
    strategy (e.g. ``catmullrom``, ``bezier``) fall back to linear and
    are reported once.
    """
    if not name:
        return default_interpolation()

    key = name.lower()
    strategy = INTERPOLATIONS.get(key)
    if strategy is not None:
        return strategy

    with _warned_lock:
        first_warning = key not in _warned_names
        _warned_names.add(key)
    if first_warning:
        logger.warning("Unsupported interpolation '%s', falling back to linear", name)
    return _LINEAR
