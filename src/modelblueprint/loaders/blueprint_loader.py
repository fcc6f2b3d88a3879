"""
Blueprint Loader

Loads model documents from disk and builds blueprints from them.
"""

from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..animation import BlueprintAnimation
from ..bone import BoneTagRegistry, default_registry
from ..config.settings import MAX_BUILD_WORKERS, MODEL_FILE_ENCODING
from ..core.hierarchy import resolve_children, root_groups
from ..raw.model_data import ModelData, ModelFormatError
from .blueprint import ModelBlueprint
from .texture import BlueprintTexture

logger = logging.getLogger(__name__)


class BlueprintLoader:
    """
    Builds ModelBlueprints from model documents.

    A build either returns a complete blueprint or raises; nothing is
    published half-built.
    """

    def __init__(self, registry: Optional[BoneTagRegistry] = None, max_workers: Optional[int] = MAX_BUILD_WORKERS):
        """
        Initialize loader.

        Args:
            registry: Bone tag registry used to parse bone names (defaults to the built-in tags)
            max_workers: Thread pool size for animation builds (None or 1 builds serially)
        """
        self.registry = registry if registry is not None else default_registry()
        self.max_workers = max_workers

    def load(self, filepath: Union[str, Path]) -> ModelBlueprint:
        """
        Load a model document and build its blueprint.

        Args:
            filepath: Path to the JSON model document

        Returns:
            ModelBlueprint named after the document (or the file stem)
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Model file not found: {filepath}")

        logger.info("Loading model: %s", filepath)
        with filepath.open("r", encoding=MODEL_FILE_ENCODING) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ModelFormatError(f"{filepath.name}: invalid JSON ({exc})") from exc

        return self.build(payload, name=filepath.stem)

    def build(self, data: Union[ModelData, Dict[str, Any]], name: Optional[str] = None) -> ModelBlueprint:
        """
        Build a blueprint from a decoded model document.

        Args:
            data: ModelData or the raw dictionary decoded from JSON
            name: Blueprint name; defaults to the document's own name

        Returns:
            ModelBlueprint instance

        Raises:
            ModelFormatError: If the document is malformed
            BlueprintBuildError: If the outliner references unknown elements
        """
        if not isinstance(data, ModelData):
            data = ModelData.from_dict(data)

        blueprint_name = data.name or name or "model"
        elements = {element.uuid: element for element in data.elements}
        group = resolve_children(data.outliner, elements, self.registry)
        textures = [BlueprintTexture.from_model(texture) for texture in data.textures]
        animations = self._build_animations(data, root_groups(group))

        blueprint = ModelBlueprint(
            name=blueprint_name,
            scale=data.scale(),
            resolution=data.resolution,
            textures=textures,
            group=group,
            animations={animation.name: animation for animation in animations},
        )
        logger.info(
            "  Built blueprint '%s': %d elements, %d textures, %d animations",
            blueprint_name, len(elements), len(textures), len(animations),
        )
        return blueprint

    def _build_animations(self, data: ModelData, groups) -> List[BlueprintAnimation]:
        if not data.animations:
            return []

        def build_one(animation):
            return BlueprintAnimation.from_model(groups, animation, self.registry)

        if self.max_workers is None or self.max_workers <= 1 or len(data.animations) == 1:
            return [build_one(animation) for animation in data.animations]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            # map() re-raises the first failure when its result is reached
            return list(executor.map(build_one, data.animations))


def load_blueprint(filepath: Union[str, Path], registry: Optional[BoneTagRegistry] = None) -> ModelBlueprint:
    """Load a blueprint with a default loader."""
    return BlueprintLoader(registry).load(filepath)
