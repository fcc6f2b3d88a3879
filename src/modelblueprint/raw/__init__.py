"""Typed view of decoded model documents."""

from .model_data import (
    ModelFormatError, AnimationType, KeyFrameChannel,
    ModelData, ModelResolution, ModelElement, ModelUV, ModelGroup, ModelUUID,
    ModelChildren, ModelTexture, ModelAnimation, ModelAnimator, ModelKeyFrame,
    DataPoint, parse_children,
)

__all__ = [
    'ModelFormatError',
    'AnimationType',
    'KeyFrameChannel',
    'ModelData',
    'ModelResolution',
    'ModelElement',
    'ModelUV',
    'ModelGroup',
    'ModelUUID',
    'ModelChildren',
    'ModelTexture',
    'ModelAnimation',
    'ModelAnimator',
    'ModelKeyFrame',
    'DataPoint',
    'parse_children',
]
