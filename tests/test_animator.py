"""Tests for the per-channel animator builder"""

import itertools

import numpy as np

from src.modelblueprint.animation.animator import BlueprintAnimator, BlueprintAnimatorBuilder
from src.modelblueprint.animation.interpolation import LinearInterpolation, StepInterpolation
from src.modelblueprint.bone import BoneName
from src.modelblueprint.raw.model_data import AnimationType, DataPoint, KeyFrameChannel, ModelKeyFrame


def keyframe(channel, time, x, y=0.0, z=0.0, interpolation="linear"):
    return ModelKeyFrame(
        channel=KeyFrameChannel(channel),
        data_points=[DataPoint(x, y, z)],
        time=time,
        interpolation=interpolation,
    )


def test_position_converted_to_display_blocks():
    """Positions are divided into blocks and z is flipped"""
    data = BlueprintAnimatorBuilder(1.0).add_frame(keyframe("position", 0.0, 16.0, 32.0, 8.0)).build("arm")

    assert data.name == "arm"
    assert np.allclose(np.asarray(data.points[0].position.vector), [1.0, 2.0, -0.5])


def test_rotation_converted_to_display():
    """Rotations flip y and z"""
    data = BlueprintAnimatorBuilder(1.0).add_frame(keyframe("rotation", 0.0, 10.0, 20.0, 30.0)).build("arm")

    assert np.allclose(np.asarray(data.points[0].rotation.vector), [10.0, -20.0, -30.0])


def test_scale_converted_to_delta():
    """Scales become a delta from one"""
    data = BlueprintAnimatorBuilder(1.0).add_frame(keyframe("scale", 0.0, 2.0, 1.0, 0.5)).build("arm")

    assert np.allclose(np.asarray(data.points[0].scale.vector), [1.0, 0.0, -0.5])


def test_frames_after_length_dropped():
    """Keyframes past the animation length are ignored"""
    builder = BlueprintAnimatorBuilder(1.0)
    builder.add_frame(keyframe("position", 0.5, 16.0)).add_frame(keyframe("position", 1.5, 32.0))

    data = builder.build("arm")

    assert [p.time for p in data.points] == [0.0, 0.5, 1.0]
    assert len(builder.position) == 1


def test_other_channels_ignored():
    """Timeline, sound and particle keyframes add no motion"""
    builder = BlueprintAnimatorBuilder(1.0)
    for channel in ("timeline", "sound", "particle"):
        builder.add_frame(keyframe(channel, 0.5, 1.0))

    data = builder.build("arm")

    assert [p.time for p in data.points] == [0.0, 1.0]
    assert not builder.position and not builder.rotation and not builder.scale


def test_duplicate_times_first_wins():
    """Two keys at the same time keep the first one seen"""
    builder = BlueprintAnimatorBuilder(1.0)
    builder.add_frame(keyframe("position", 0.5, 16.0))
    builder.add_frame(keyframe("position", 0.5, 48.0))

    data = builder.build("arm")

    assert [p.time for p in data.points] == [0.0, 0.5, 1.0]
    assert np.allclose(np.asarray(data.points[1].position.vector), [1.0, 0.0, 0.0])


def test_interpolation_resolved_from_keyframe():
    """Each point carries the keyframe's interpolation"""
    builder = BlueprintAnimatorBuilder(1.0)
    builder.add_frame(keyframe("position", 0.0, 0.0, interpolation="step"))
    builder.add_frame(keyframe("position", 1.0, 16.0, interpolation=""))

    assert isinstance(builder.position[0].interpolation, StepInterpolation)
    assert isinstance(builder.position[1].interpolation, LinearInterpolation)


def test_unsorted_keys_are_ordered():
    """Keys added out of order are merged in time order"""
    builder = BlueprintAnimatorBuilder(2.0)
    builder.add_frame(keyframe("position", 2.0, 32.0))
    builder.add_frame(keyframe("position", 0.0, 0.0))

    data = builder.build("arm")

    assert [p.time for p in data.points] == [0.0, 2.0]
    assert np.allclose(np.asarray(data.points[1].position.vector), [2.0, 0.0, 0.0])


def _animator():
    data = BlueprintAnimatorBuilder(1.0).add_frame(keyframe("position", 0.5, 16.0)).build("arm")
    return BlueprintAnimator("arm", BoneName.untagged("arm"), data.points)


def test_play_once_iterator():
    """Play-once yields every point once"""
    animator = _animator()

    assert [p.time for p in animator.iterator(AnimationType.PLAY_ONCE)] == [0.0, 0.5, 1.0]


def test_loop_iterator_restarts_at_second_point():
    """Loop repeats from the second point"""
    animator = _animator()

    times = [p.time for p in itertools.islice(animator.iterator(AnimationType.LOOP), 7)]

    assert times == [0.0, 0.5, 1.0, 0.5, 1.0, 0.5, 1.0]


def test_hold_on_last_iterator():
    """Hold-on-last repeats the final point"""
    animator = _animator()

    times = [p.time for p in itertools.islice(animator.iterator(AnimationType.HOLD_ON_LAST), 5)]

    assert times == [0.0, 0.5, 1.0, 1.0, 1.0]
