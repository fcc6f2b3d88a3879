"""Tests for model document parsing"""

import math

import numpy as np
import pytest

from src.modelblueprint.raw.model_data import (
    AnimationType, KeyFrameChannel, ModelData, ModelFormatError, ModelGroup, ModelUUID,
)


def element(uuid="e1", size=(2.0, 2.0, 1.0)):
    return {
        "name": f"cube_{uuid}",
        "uuid": uuid,
        "from": [0, 0, 0],
        "to": list(size),
        "origin": [0, 0, 0],
        "faces": {"north": {"uv": [0, 0, 4, 4], "texture": 0}, "up": {"uv": [0, 0, 4, 4], "texture": False}},
    }


def document(**overrides):
    data = {
        "name": "robot",
        "resolution": {"width": 64, "height": 32},
        "elements": [element()],
        "outliner": [{"name": "h_head", "uuid": "g1", "origin": [0, 8, 0], "rotation": [0, 0, 0], "children": ["e1"]}],
        "animations": [],
    }
    data.update(overrides)
    return data


def animation(keyframes, **fields):
    data = {
        "name": "idle",
        "length": 1.0,
        "animators": {"g1": {"name": "h_head", "keyframes": keyframes}},
    }
    data.update(fields)
    return data


def test_minimal_document():
    """A document needs only a resolution"""
    model = ModelData.from_dict({"resolution": {"width": 16, "height": 16}})

    assert model.resolution.width == 16
    assert model.elements == []
    assert model.outliner == []
    assert model.animations == []


def test_document_fields():
    """Elements, outliner and faces are parsed into typed values"""
    model = ModelData.from_dict(document())

    assert model.name == "robot"
    assert (model.resolution.width, model.resolution.height) == (64, 32)

    cube = model.elements[0]
    assert np.allclose(np.asarray(cube.to), [2.0, 2.0, 1.0])
    assert cube.faces["north"].texture == "#0"
    assert cube.faces["up"].texture is None

    group = model.outliner[0]
    assert isinstance(group, ModelGroup)
    assert np.allclose(np.asarray(group.origin), [0.0, 8.0, 0.0])
    assert group.children == [ModelUUID("e1")]


def test_missing_resolution_raises():
    """The resolution is required"""
    with pytest.raises(ModelFormatError, match="resolution"):
        ModelData.from_dict({"elements": []})


def test_non_object_document_raises():
    """Documents must decode to an object"""
    with pytest.raises(ModelFormatError):
        ModelData.from_dict([1, 2, 3])


def test_element_missing_field_raises():
    """Elements need from, to and origin"""
    broken = element()
    del broken["to"]

    with pytest.raises(ModelFormatError, match="to"):
        ModelData.from_dict(document(elements=[broken]))


def test_data_points_accept_numeric_strings():
    """Editor exports store coordinates as strings"""
    keyframe = {"channel": "position", "time": 0.5, "data_points": [{"x": "1.5", "y": "-2", "z": 0}]}

    model = ModelData.from_dict(document(animations=[animation([keyframe])]))
    frame = model.animations[0].animators["g1"].keyframes[0]

    assert frame.channel == KeyFrameChannel.POSITION
    assert np.allclose(np.asarray(frame.data_points[0].to_vector()), [1.5, -2.0, 0.0])


def test_non_numeric_data_point_raises():
    """Coordinates that are not numbers are rejected"""
    keyframe = {"channel": "rotation", "time": 0.0, "data_points": [{"x": "abc", "y": 0, "z": 0}]}

    with pytest.raises(ModelFormatError, match="abc"):
        ModelData.from_dict(document(animations=[animation([keyframe])]))


def test_motion_data_point_missing_axis_raises():
    """Position, rotation and scale samples need all three axes"""
    keyframe = {"channel": "position", "time": 0.0, "data_points": [{"y": "1", "z": "2"}]}

    with pytest.raises(ModelFormatError, match="'x'"):
        ModelData.from_dict(document(animations=[animation([keyframe])]))


def test_script_data_point_may_omit_axes():
    """Timeline samples only carry a script"""
    keyframe = {"channel": "timeline", "time": 0.25, "data_points": [{"script": "say('hi')"}]}

    model = ModelData.from_dict(document(animations=[animation([keyframe])]))
    point = model.animations[0].animators["g1"].keyframes[0].data_points[0]

    assert point.script == "say('hi')"
    assert (point.x, point.y, point.z) == (0.0, 0.0, 0.0)


def test_group_missing_transform_raises():
    """Outliner groups need an origin and a rotation"""
    for missing in ("origin", "rotation"):
        group = {"name": "body", "uuid": "g", "origin": [0, 0, 0], "rotation": [0, 0, 0], "children": []}
        del group[missing]

        with pytest.raises(ModelFormatError, match=missing):
            ModelData.from_dict(document(outliner=[group]))


def test_unknown_channel_raises():
    """Channels outside the known set are rejected"""
    keyframe = {"channel": "color", "time": 0.0, "data_points": []}

    with pytest.raises(ModelFormatError, match="color"):
        ModelData.from_dict(document(animations=[animation([keyframe])]))


def test_loop_and_override_parsed():
    """Loop mode and override flag are read from the animation"""
    model = ModelData.from_dict(document(animations=[
        animation([], loop="loop", override=True),
        animation([], name="rest", loop="hold"),
        animation([], name="once"),
    ]))

    loop, hold, once = model.animations
    assert loop.loop_type == AnimationType.LOOP
    assert loop.overriding is True
    assert hold.loop_type == AnimationType.HOLD_ON_LAST
    assert once.loop_type == AnimationType.PLAY_ONCE
    assert once.overriding is False


def test_unknown_loop_raises():
    """Unknown loop modes are rejected"""
    with pytest.raises(ModelFormatError, match="bounce"):
        ModelData.from_dict(document(animations=[animation([], loop="bounce")]))


def test_nameless_animator_kept_without_name():
    """Animators may omit their name"""
    model = ModelData.from_dict(document(animations=[
        {"name": "idle", "length": 1.0, "animators": {"effect": {"keyframes": []}}},
    ]))

    assert model.animations[0].animators["effect"].name is None


def test_texture_uv_size_defaults_to_image_size():
    """uv_width and uv_height fall back to width and height"""
    model = ModelData.from_dict(document(textures=[
        {"name": "skin", "source": "data:image/png;base64,", "width": 32, "height": 16},
    ]))

    texture = model.textures[0]
    assert (texture.uv_width, texture.uv_height) == (32, 16)


def test_scale_is_largest_diagonal():
    """Scale is the longest element diagonal"""
    model = ModelData.from_dict(document(elements=[element("e1", (2, 2, 1)), element("e2", (3, 4, 0))]))

    assert math.isclose(model.scale(), 5.0)


def test_scale_default_without_elements():
    """Models without elements use the default scale"""
    model = ModelData.from_dict({"resolution": {"width": 16, "height": 16}})

    assert model.scale() == 16.0
