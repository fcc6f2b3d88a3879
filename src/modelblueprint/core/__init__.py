"""Core math helpers"""
from .math_utils import vec3, zero, lerp, transform_to_display, animation_to_display, to_block_scale

__all__ = [
    "vec3",
    "zero",
    "lerp",
    "transform_to_display",
    "animation_to_display",
    "to_block_scale",
]
