"""Loader utilities for model documents and blueprints."""

from .texture import BlueprintTexture, decode_data_url
from .blueprint import ModelBlueprint
from .blueprint_loader import BlueprintLoader, load_blueprint

__all__ = ['BlueprintTexture', 'decode_data_url', 'ModelBlueprint', 'BlueprintLoader', 'load_blueprint']
