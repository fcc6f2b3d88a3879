"""
Math Utilities

Vector helpers and the editor-to-display coordinate conventions.
"""

from typing import Sequence

import numpy as np
from pyrr import Vector3

from ..config.settings import MODEL_TO_BLOCK_MULTIPLIER


def vec3(values: Sequence[float]) -> Vector3:
    """Build a float Vector3 from any 3-sequence."""
    return Vector3([float(values[0]), float(values[1]), float(values[2])])


def zero() -> Vector3:
    return Vector3([0.0, 0.0, 0.0])


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    """Linear interpolation between two vectors."""
    return Vector3(a * (1.0 - t) + b * t)


def transform_to_display(vector: Vector3) -> Vector3:
    """Convert an editor position into display space (z is flipped)."""
    return Vector3([vector[0], vector[1], -vector[2]])


def animation_to_display(vector: Vector3) -> Vector3:
    """Convert an editor euler rotation into display space (y and z are flipped)."""
    return Vector3([vector[0], -vector[1], -vector[2]])


def to_block_scale(vector: Vector3) -> Vector3:
    """Convert editor pixels into blocks."""
    return Vector3(vector / MODEL_TO_BLOCK_MULTIPLIER)


def length(vector: Vector3) -> float:
    return float(np.linalg.norm(vector))
