"""
ModelBlueprint - Animation blueprints for block models

Turns model documents exported by a block-model editor into a bone
hierarchy with tagged names and per-bone animation sample sequences.
"""

# Configuration
from .config.settings import *

# Bones
from .bone import BoneTag, BoneName, BoneTagRegistry, default_registry

# Raw documents
from .raw import ModelData, ModelFormatError, AnimationType, KeyFrameChannel

# Hierarchy
from .core.hierarchy import BlueprintGroup, BlueprintBuildError

# Animation
from .animation import (
    VectorPoint,
    VectorInterpolation,
    LinearInterpolation,
    AnimationPoint,
    AnimationTree,
    AnimationGenerator,
    BlueprintAnimation,
    BlueprintAnimator,
    BlueprintAnimatorBuilder,
    merge,
)

# Loaders
from .loaders import BlueprintLoader, BlueprintTexture, ModelBlueprint, load_blueprint

__version__ = "0.1.0"
__all__ = [
    # Config (exported via *)
    # Bones
    "BoneTag",
    "BoneName",
    "BoneTagRegistry",
    "default_registry",
    # Raw documents
    "ModelData",
    "ModelFormatError",
    "AnimationType",
    "KeyFrameChannel",
    # Hierarchy
    "BlueprintGroup",
    "BlueprintBuildError",
    # Animation
    "VectorPoint",
    "VectorInterpolation",
    "LinearInterpolation",
    "AnimationPoint",
    "AnimationTree",
    "AnimationGenerator",
    "BlueprintAnimation",
    "BlueprintAnimator",
    "BlueprintAnimatorBuilder",
    "merge",
    # Loaders
    "BlueprintLoader",
    "BlueprintTexture",
    "ModelBlueprint",
    "load_blueprint",
]
