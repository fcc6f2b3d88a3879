"""Tests for interpolation strategies"""

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from pyrr import Vector3

from src.modelblueprint.animation.interpolation import (
    LinearInterpolation, StepInterpolation, VectorPoint,
    default_interpolation, find_interpolation,
)


def point(t, x, y=0.0, z=0.0, interpolation=None):
    return VectorPoint(Vector3([x, y, z]), t, interpolation or LinearInterpolation())


def test_linear_midpoint():
    """Linear interpolation at the middle of a span"""
    points = [point(0.0, 0.0), point(2.0, 4.0, 2.0)]

    result = LinearInterpolation().interpolate(points, 1, 1.0)

    assert result.time == 1.0
    assert np.allclose(np.asarray(result.vector), [2.0, 1.0, 0.0])


def test_linear_from_origin_when_first_index():
    """Before the first point the span starts at a zero point at t=0"""
    points = [point(2.0, 4.0)]

    result = LinearInterpolation().interpolate(points, 0, 0.5)

    assert np.allclose(np.asarray(result.vector), [1.0, 0.0, 0.0])


def test_linear_zero_span_last_wins():
    """Two points sharing a timestamp resolve to the later one"""
    points = [point(1.0, 1.0), point(1.0, 5.0)]

    result = LinearInterpolation().interpolate(points, 1, 1.0)

    assert np.allclose(np.asarray(result.vector), [5.0, 0.0, 0.0])
    assert np.all(np.isfinite(np.asarray(result.vector)))


def test_linear_zero_span_at_time_zero():
    """A first point at t=0 does not divide by zero"""
    points = [point(0.0, 3.0)]

    result = LinearInterpolation().interpolate(points, 0, 0.0)

    assert np.allclose(np.asarray(result.vector), [3.0, 0.0, 0.0])


def test_step_holds_previous_value():
    """Step interpolation keeps the previous value"""
    step = StepInterpolation()
    points = [point(0.0, 1.0), point(1.0, 5.0)]

    result = step.interpolate(points, 1, 0.75)

    assert np.allclose(np.asarray(result.vector), [1.0, 0.0, 0.0])


def test_find_interpolation_by_name():
    """Known names resolve case-insensitively"""
    assert isinstance(find_interpolation("linear"), LinearInterpolation)
    assert isinstance(find_interpolation("STEP"), StepInterpolation)


def test_find_interpolation_default():
    """Missing names use the default strategy"""
    assert find_interpolation("") == default_interpolation()
    assert find_interpolation(None) == default_interpolation()
    assert isinstance(default_interpolation(), LinearInterpolation)


def test_find_interpolation_unknown_warns(caplog):
    """Unknown names fall back to linear with a warning"""
    with caplog.at_level(logging.WARNING):
        strategy = find_interpolation("wobble_curve_test")

    assert isinstance(strategy, LinearInterpolation)
    assert "wobble_curve_test" in caplog.text


def test_find_interpolation_unknown_warns_once_across_threads(caplog):
    """Concurrent lookups of one unknown name report it a single time"""
    with caplog.at_level(logging.WARNING):
        with ThreadPoolExecutor(max_workers=8) as executor:
            strategies = list(executor.map(find_interpolation, ["jitter_curve_test"] * 64))

    assert all(isinstance(s, LinearInterpolation) for s in strategies)
    warnings = [r for r in caplog.records if "jitter_curve_test" in r.getMessage()]
    assert len(warnings) == 1


def test_vector_point_equality():
    """Points compare by time, vector and strategy"""
    assert point(1.0, 2.0) == point(1.0, 2.0)
    assert point(1.0, 2.0) != point(1.0, 3.0)
    assert point(1.0, 2.0) != point(1.0, 2.0, interpolation=StepInterpolation())


def test_empty_point():
    """The empty point is a zero vector at t=0"""
    empty = VectorPoint.empty()

    assert empty.time == 0.0
    assert np.allclose(np.asarray(empty.vector), [0.0, 0.0, 0.0])
    assert isinstance(empty.interpolation, LinearInterpolation)
