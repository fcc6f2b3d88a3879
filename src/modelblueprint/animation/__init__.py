"""
Animation System

Merges authored keyframe channels into per-bone sample sequences.
"""

from .interpolation import (
    VectorPoint, VectorInterpolation, LinearInterpolation, StepInterpolation,
    default_interpolation, find_interpolation,
)
from .timeline import AnimationPoint, breakpoints, merge, merge_at, resample
from .animator import AnimatorData, BlueprintAnimator, BlueprintAnimatorBuilder
from .animation_tree import AnimationTree
from .script import BlueprintScript, TimeScript
from .animation import AnimationGenerator, BlueprintAnimation, empty_points

__all__ = [
    'VectorPoint',
    'VectorInterpolation',
    'LinearInterpolation',
    'StepInterpolation',
    'default_interpolation',
    'find_interpolation',
    'AnimationPoint',
    'breakpoints',
    'merge',
    'merge_at',
    'resample',
    'AnimatorData',
    'BlueprintAnimator',
    'BlueprintAnimatorBuilder',
    'AnimationTree',
    'BlueprintScript',
    'TimeScript',
    'AnimationGenerator',
    'BlueprintAnimation',
    'empty_points',
]
