"""
Bone names

Tag registry and parsed bone identifiers.
"""

from .bone_tag import (
    BoneTag, BoneItemMapper, BUILTIN_TAGS,
    HEAD, HEAD_WITH_CHILDREN, HITBOX, SEAT, SUB_SEAT,
)
from .registry import BoneName, BoneTagRegistry, default_registry

__all__ = [
    'BoneTag',
    'BoneItemMapper',
    'BoneName',
    'BoneTagRegistry',
    'default_registry',
    'BUILTIN_TAGS',
    'HEAD',
    'HEAD_WITH_CHILDREN',
    'HITBOX',
    'SEAT',
    'SUB_SEAT',
]
