from __future__ import annotations

import math

from habit_home.core.geometry import (
    bounding_box_center,
    euclidean_distance,
    mean_distance,
    transform_point,
    weighted_term,
)


SHIFT = (
    (1.0, 0.0, 0.0, 2.0),
    (0.0, 1.0, 0.0, 0.5),
    (0.0, 0.0, 1.0, -1.0),
    (0.0, 0.0, 0.0, 1.0),
)

# 90 degrees about +y: local x -> world -z, local z -> world x
ROT_Y_90 = (
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


def _assert_point_close(actual, expected, eps: float = 1e-9) -> None:
    assert len(actual) == 3
    for a, e in zip(actual, expected):
        assert abs(a - e) <= eps


def test_transform_point_translation():
    _assert_point_close(transform_point(SHIFT, (0.0, 1.0, 0.0)), (2.0, 1.5, -1.0))


def test_transform_point_rotation():
    _assert_point_close(transform_point(ROT_Y_90, (1.0, 0.0, 0.0)), (0.0, 0.0, -1.0))
    _assert_point_close(transform_point(ROT_Y_90, (0.0, 0.3, 0.0)), (0.0, 0.3, 0.0))


def test_bounding_box_center():
    assert bounding_box_center((-1.0, 0.0, -2.0), (1.0, 2.0, 0.0)) == (0.0, 1.0, -1.0)


def test_euclidean_distance():
    assert euclidean_distance((0, 0, 0), (3, 4, 0)) == 5.0
    assert euclidean_distance((1, 1, 1), (1, 1, 1)) == 0.0


def test_mean_distance():
    assert abs(mean_distance((0, 0, 0), [(0, 0, 0.1), (0, 0, -0.1)]) - 0.1) <= 1e-12
    assert abs(mean_distance((0, 0, 0), [(3, 4, 0), (0, 0, 1)]) - 3.0) <= 1e-12


def test_mean_distance_empty_is_infinite():
    assert mean_distance((0, 0, 0), []) == math.inf


def test_weighted_term_zero_weight_ignores_infinity():
    assert weighted_term(math.inf, 0.0) == 0.0
    assert weighted_term(math.inf, 0.5) == math.inf
    assert weighted_term(2.0, 0.25) == 0.5
