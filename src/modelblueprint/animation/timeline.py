"""
Timeline

Merges independently keyed position/rotation/scale channels into one
synchronized sample sequence.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .interpolation import VectorPoint


@dataclass(frozen=True)
class AnimationPoint:
    """Time-aligned position/rotation/scale sample of one bone."""

    position: VectorPoint
    rotation: VectorPoint
    scale: VectorPoint

    @property
    def time(self) -> float:
        return self.position.time

    def __repr__(self):
        return f"AnimationPoint(t={self.time:.3f})"


def breakpoints(length: float, *channels: Sequence[VectorPoint]) -> List[float]:
    """
    Every time at which a merged sequence is sampled.

    Always contains 0 and ``length``; duplicates collapse on exact value.
    """
    times = {0.0, float(length)}
    for channel in channels:
        times.update(point.time for point in channel)
    return sorted(times)


def merge(
    length: float,
    position: Sequence[VectorPoint],
    rotation: Sequence[VectorPoint],
    scale: Sequence[VectorPoint],
) -> List[AnimationPoint]:
    """
    Resample three channels onto their shared breakpoints.

    Args:
        length: Animation length in seconds
        position: Position points, ascending and unique in time
        rotation: Rotation points, ascending and unique in time
        scale: Scale points, ascending and unique in time

    Returns:
        One AnimationPoint per breakpoint, ascending in time
    """
    times = breakpoints(length, position, rotation, scale)
    return merge_at(times, position, rotation, scale)


def merge_at(
    times: Sequence[float],
    position: Sequence[VectorPoint],
    rotation: Sequence[VectorPoint],
    scale: Sequence[VectorPoint],
) -> List[AnimationPoint]:
    """Resample three channels onto an explicit ascending breakpoint list."""
    return [
        AnimationPoint(p, r, s)
        for p, r, s in zip(
            resample(position, times),
            resample(rotation, times),
            resample(scale, times),
        )
    ]


def resample(points: Sequence[VectorPoint], times: Iterable[float]) -> List[VectorPoint]:
    """
    Sample one channel at every breakpoint.

    The window (previous, next) over the authored points only ever moves
    forward, so ``times`` must be ascending.
    """
    if len(points) < 2:
        first = points[0] if points else VectorPoint.empty()
        return [VectorPoint(first.vector.copy(), time, first.interpolation) for time in times]

    result: List[VectorPoint] = []
    last = points[-1]
    previous = VectorPoint.empty()
    index = 0
    current = points[0]

    for time in times:
        while index < len(points) - 1 and current.time < time:
            previous = current
            index += 1
            current = points[index]

        if time > last.time:
            # Past the final key: hold
            result.append(VectorPoint(last.vector.copy(), time, last.interpolation))
        elif time == current.time:
            result.append(current)
        else:
            result.append(previous.interpolation.interpolate(points, index, time))

    # Breakpoints ran out before the final authored point
    if current.time < last.time:
        start = index + 1 if result and result[-1] is current else index
        result.extend(points[start:])

    return result
