from __future__ import annotations

import math

from habit_home.core.scoring import score_candidates
from habit_home.models.habit import RecommendationSettings
from habit_home.models.recommendation import SurfaceCandidate
from habit_home.models.room import PathPoint


PATH = [
    PathPoint(position=(0.0, 0.0, 0.1), timestamp=0.0),
    PathPoint(position=(0.0, 0.0, -0.1), timestamp=0.5),
]
A = SurfaceCandidate(source_object_index=0, world_center=(0.0, 0.0, 0.0))
B = SurfaceCandidate(source_object_index=3, world_center=(2.0, 0.0, 0.0))
BALANCED = RecommendationSettings(path_weight=0.5, furniture_weight=0.5)


def _assert_close(actual: float, expected: float, eps: float = 1e-9) -> None:
    assert abs(float(actual) - float(expected)) <= eps


def test_scores_use_mean_distances():
    scored = score_candidates([A, B], PATH, [(3.0, 0.0, 0.0)], BALANCED)
    assert [s.source_object_index for s in scored] == [0, 3]

    a, b = scored
    _assert_close(a.path_distance, 0.1)
    _assert_close(a.furniture_distance, 3.0)
    _assert_close(a.score, 1.55)
    _assert_close(b.path_distance, math.sqrt(4.01))
    _assert_close(b.furniture_distance, 1.0)
    _assert_close(b.score, 0.5 * math.sqrt(4.01) + 0.5)


def test_no_furniture_with_zero_furniture_weight_scores_path_only():
    path_only = RecommendationSettings(path_weight=1.0, furniture_weight=0.0)
    (a,) = score_candidates([A], PATH, [], path_only)
    assert a.furniture_distance == math.inf
    assert not math.isnan(a.score)
    assert a.score == a.path_distance


def test_no_path_with_zero_path_weight_scores_furniture_only():
    furniture_only = RecommendationSettings(path_weight=0.0, furniture_weight=1.0)
    (b,) = score_candidates([B], [], [(3.0, 0.0, 0.0)], furniture_only)
    assert b.path_distance == math.inf
    assert b.score == 1.0


def test_missing_weighted_side_scores_infinite():
    (a,) = score_candidates([A], PATH, [], BALANCED)
    assert a.score == math.inf


def test_timestamps_and_confidence_do_not_matter():
    reordered = [
        PathPoint(position=(0.0, 0.0, -0.1), timestamp=9.0, confidence=0.1),
        PathPoint(position=(0.0, 0.0, 0.1), timestamp=1.0, confidence=1.0),
    ]
    first = score_candidates([A, B], PATH, [(3.0, 0.0, 0.0)], BALANCED)
    second = score_candidates([A, B], reordered, [(3.0, 0.0, 0.0)], BALANCED)
    for x, y in zip(first, second):
        _assert_close(x.score, y.score)


def test_no_candidates_scores_nothing():
    assert score_candidates([], PATH, [(3.0, 0.0, 0.0)], BALANCED) == []
