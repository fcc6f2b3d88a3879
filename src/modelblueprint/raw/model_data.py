"""
Model Data

Validated, typed view of a decoded model document. Every ``from_dict``
raises :class:`ModelFormatError` on the first invalid field; nothing is
partially loaded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pyrr import Vector3

from ..config.settings import DEFAULT_MODEL_SCALE
from ..core.math_utils import length, vec3, zero


class ModelFormatError(ValueError):
    """Raised when a model document is missing fields or holds invalid values."""


FACE_NAMES = ("north", "east", "south", "west", "up", "down")


class AnimationType(Enum):
    """Playback behaviour once the animation reaches its end."""
    PLAY_ONCE = "once"
    LOOP = "loop"
    HOLD_ON_LAST = "hold"


class KeyFrameChannel(Enum):
    """Property a keyframe animates."""
    POSITION = "position"
    ROTATION = "rotation"
    SCALE = "scale"
    TIMELINE = "timeline"
    SOUND = "sound"
    PARTICLE = "particle"


MOTION_CHANNELS = frozenset({KeyFrameChannel.POSITION, KeyFrameChannel.ROTATION, KeyFrameChannel.SCALE})


# ----------------------------------------------------------------------------
# Field helpers
# ----------------------------------------------------------------------------

def _require(data: Dict[str, Any], key: str, context: str) -> Any:
    if not isinstance(data, dict):
        raise ModelFormatError(f"{context} must be an object")
    if key not in data or data[key] is None:
        raise ModelFormatError(f"{context} is missing required '{key}' field")
    return data[key]


def _float(value: Any, context: str) -> float:
    if isinstance(value, bool):
        raise ModelFormatError(f"{context}: expected a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ModelFormatError(f"{context}: expected a number, got {value!r}") from None


def _vec3(value: Any, context: str) -> Vector3:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ModelFormatError(f"{context}: expected 3 numbers, got {value!r}")
    return vec3([_float(v, context) for v in value])


def _optional_vec3(data: Dict[str, Any], key: str, context: str) -> Vector3:
    if data.get(key) is None:
        return zero()
    return _vec3(data[key], f"{context}.{key}")


def _list(value: Any, context: str) -> List[Any]:
    if not isinstance(value, list):
        raise ModelFormatError(f"{context}: expected a list")
    return value


# ----------------------------------------------------------------------------
# Geometry
# ----------------------------------------------------------------------------

@dataclass
class ModelResolution:
    width: int
    height: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelResolution":
        return cls(
            width=int(_float(_require(data, "width", "resolution"), "resolution.width")),
            height=int(_float(_require(data, "height", "resolution"), "resolution.height")),
        )


@dataclass
class ModelUV:
    """UV mapping of one element face."""

    uv: Tuple[float, float, float, float]
    rotation: float = 0.0
    texture: Optional[str] = None  # "#<texture index>"

    @classmethod
    def from_dict(cls, data: Dict[str, Any], context: str) -> "ModelUV":
        uv = _require(data, "uv", context)
        if not isinstance(uv, (list, tuple)) or len(uv) != 4:
            raise ModelFormatError(f"{context}.uv: expected 4 numbers, got {uv!r}")

        texture = data.get("texture")
        if texture is False:
            texture = None
        if texture is not None:
            texture = f"#{int(_float(texture, f'{context}.texture'))}"

        return cls(
            uv=tuple(_float(v, f"{context}.uv") for v in uv),
            rotation=_float(data.get("rotation", 0.0), f"{context}.rotation"),
            texture=texture,
        )


@dataclass
class ModelElement:
    """Cuboid element of the model."""

    name: str
    uuid: str
    from_: Vector3
    to: Vector3
    origin: Vector3
    rotation: Vector3 = field(default_factory=zero)
    inflate: float = 0.0
    faces: Dict[str, ModelUV] = field(default_factory=dict)
    visibility: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelElement":
        uuid = str(_require(data, "uuid", "element"))
        context = f"element '{data.get('name', uuid)}'"

        faces = {}
        raw_faces = data.get("faces") or {}
        if not isinstance(raw_faces, dict):
            raise ModelFormatError(f"{context}.faces must be an object")
        for face_name in FACE_NAMES:
            if face_name in raw_faces:
                faces[face_name] = ModelUV.from_dict(raw_faces[face_name], f"{context}.faces.{face_name}")

        return cls(
            name=str(_require(data, "name", context)),
            uuid=uuid,
            from_=_vec3(_require(data, "from", context), f"{context}.from"),
            to=_vec3(_require(data, "to", context), f"{context}.to"),
            origin=_vec3(_require(data, "origin", context), f"{context}.origin"),
            rotation=_optional_vec3(data, "rotation", context),
            inflate=_float(data.get("inflate", 0.0), f"{context}.inflate"),
            faces=faces,
            visibility=bool(data.get("visibility", False)),
        )

    def max(self) -> float:
        """Length of the element's diagonal."""
        return length(self.to - self.from_)


@dataclass
class ModelGroup:
    """Outliner group: a bone."""

    name: str
    uuid: str
    origin: Vector3
    rotation: Vector3
    children: List["ModelChildren"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelGroup":
        name = str(_require(data, "name", "outliner group"))
        context = f"outliner group '{name}'"
        return cls(
            name=name,
            uuid=str(data.get("uuid", "")),
            origin=_vec3(_require(data, "origin", context), f"{context}.origin"),
            rotation=_vec3(_require(data, "rotation", context), f"{context}.rotation"),
            children=[
                parse_children(child, context)
                for child in _list(data.get("children", []), f"{context}.children")
            ],
        )


@dataclass
class ModelUUID:
    """Reference from the outliner to an element."""

    uuid: str


ModelChildren = Union[ModelGroup, ModelUUID]


def parse_children(data: Any, context: str = "outliner") -> ModelChildren:
    """Parse an outliner entry: a uuid string or a group object."""
    if isinstance(data, str):
        return ModelUUID(data)
    if isinstance(data, dict):
        if "children" not in data and "name" not in data and "uuid" in data:
            return ModelUUID(str(data["uuid"]))
        return ModelGroup.from_dict(data)
    raise ModelFormatError(f"{context}: invalid outliner entry {data!r}")


# ----------------------------------------------------------------------------
# Textures
# ----------------------------------------------------------------------------

@dataclass
class ModelTexture:
    name: str
    source: str  # data URL holding the base64 encoded image
    width: int
    height: int
    uv_width: int
    uv_height: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelTexture":
        name = str(_require(data, "name", "texture"))
        context = f"texture '{name}'"
        width = int(_float(_require(data, "width", context), f"{context}.width"))
        height = int(_float(_require(data, "height", context), f"{context}.height"))
        return cls(
            name=name,
            source=str(_require(data, "source", context)),
            width=width,
            height=height,
            uv_width=int(_float(data.get("uv_width", width), f"{context}.uv_width")),
            uv_height=int(_float(data.get("uv_height", height), f"{context}.uv_height")),
        )


# ----------------------------------------------------------------------------
# Animations
# ----------------------------------------------------------------------------

@dataclass
class DataPoint:
    """One authored sample; coordinates arrive as strings."""

    x: float
    y: float
    z: float
    script: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any], context: str, require_vector: bool = True) -> "DataPoint":
        """
        Parse a data point.

        Position, rotation and scale samples must carry x, y and z;
        script-only channels may leave them out.
        """
        if not isinstance(data, dict):
            raise ModelFormatError(f"{context}: data point must be an object")

        def axis(key):
            if require_vector:
                return _float(_require(data, key, context), f"{context}.{key}")
            return _float(data.get(key, 0.0), f"{context}.{key}")

        return cls(
            x=axis("x"),
            y=axis("y"),
            z=axis("z"),
            script=str(data.get("script") or ""),
        )

    def to_vector(self) -> Vector3:
        return Vector3([self.x, self.y, self.z])


@dataclass
class ModelKeyFrame:
    channel: KeyFrameChannel
    data_points: List[DataPoint]
    time: float
    interpolation: str = ""
    uuid: str = ""
    bezier_left_time: Vector3 = field(default_factory=zero)
    bezier_left_value: Vector3 = field(default_factory=zero)
    bezier_right_time: Vector3 = field(default_factory=zero)
    bezier_right_value: Vector3 = field(default_factory=zero)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], context: str) -> "ModelKeyFrame":
        channel_name = str(_require(data, "channel", context)).lower()
        try:
            channel = KeyFrameChannel(channel_name)
        except ValueError:
            raise ModelFormatError(f"{context}: unknown channel '{channel_name}'") from None

        time = _float(_require(data, "time", context), f"{context}.time")
        context = f"{context} ({channel.value} @ {time})"
        return cls(
            channel=channel,
            data_points=[
                DataPoint.from_dict(
                    point, f"{context}.data_points[{i}]", require_vector=channel in MOTION_CHANNELS
                )
                for i, point in enumerate(_list(data.get("data_points", []), f"{context}.data_points"))
            ],
            time=time,
            interpolation=str(data.get("interpolation") or ""),
            uuid=str(data.get("uuid", "")),
            bezier_left_time=_optional_vec3(data, "bezier_left_time", context),
            bezier_left_value=_optional_vec3(data, "bezier_left_value", context),
            bezier_right_time=_optional_vec3(data, "bezier_right_time", context),
            bezier_right_value=_optional_vec3(data, "bezier_right_value", context),
        )


@dataclass
class ModelAnimator:
    name: Optional[str]
    keyframes: List[ModelKeyFrame] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], context: str) -> "ModelAnimator":
        if not isinstance(data, dict):
            raise ModelFormatError(f"{context} must be an object")
        name = data.get("name")
        if name is not None:
            context = f"{context} '{name}'"
        return cls(
            name=str(name) if name is not None else None,
            keyframes=[
                ModelKeyFrame.from_dict(keyframe, f"{context} keyframe {i}")
                for i, keyframe in enumerate(_list(data.get("keyframes", []), f"{context}.keyframes"))
            ],
        )


@dataclass
class ModelAnimation:
    name: str
    length: float
    uuid: str = ""
    loop_type: AnimationType = AnimationType.PLAY_ONCE
    overriding: bool = False
    animators: Dict[str, ModelAnimator] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelAnimation":
        name = str(_require(data, "name", "animation"))
        context = f"animation '{name}'"

        loop_name = str(data.get("loop", "once")).lower()
        try:
            loop_type = AnimationType(loop_name)
        except ValueError:
            raise ModelFormatError(f"{context}: unknown loop type '{loop_name}'") from None

        raw_animators = data.get("animators") or {}
        if not isinstance(raw_animators, dict):
            raise ModelFormatError(f"{context}.animators must be an object")

        return cls(
            name=name,
            length=_float(_require(data, "length", context), f"{context}.length"),
            uuid=str(data.get("uuid", "")),
            loop_type=loop_type,
            overriding=bool(data.get("override", False)),
            animators={
                str(animator_id): ModelAnimator.from_dict(animator, f"{context} animator")
                for animator_id, animator in raw_animators.items()
            },
        )


# ----------------------------------------------------------------------------
# Document
# ----------------------------------------------------------------------------

@dataclass
class ModelData:
    """Complete decoded model document."""

    resolution: ModelResolution
    name: str = ""
    elements: List[ModelElement] = field(default_factory=list)
    outliner: List[ModelChildren] = field(default_factory=list)
    textures: List[ModelTexture] = field(default_factory=list)
    animations: List[ModelAnimation] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ModelData":
        """
        Validate a decoded model document.

        Args:
            data: Dictionary loaded from JSON

        Returns:
            ModelData instance

        Raises:
            ModelFormatError: On the first missing or invalid field
        """
        if not isinstance(data, dict):
            raise ModelFormatError("Model document must be an object")

        return cls(
            resolution=ModelResolution.from_dict(_require(data, "resolution", "model")),
            name=str(data.get("name", "")),
            elements=[ModelElement.from_dict(e) for e in _list(data.get("elements", []), "elements")],
            outliner=[parse_children(c) for c in _list(data.get("outliner", []), "outliner")],
            textures=[ModelTexture.from_dict(t) for t in _list(data.get("textures", []), "textures")],
            animations=[ModelAnimation.from_dict(a) for a in _list(data.get("animations", []), "animations")],
        )

    def scale(self) -> float:
        """Largest element diagonal, used to size the model."""
        if not self.elements:
            return DEFAULT_MODEL_SCALE
        return max(element.max() for element in self.elements)
