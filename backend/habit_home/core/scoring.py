"""
Candidate Scoring

Scores each candidate surface by its mean distance to the movement path
and its mean distance to the habit's furniture, weighted by the bias
settings. Lower scores are better.
"""

import logging
from typing import List, Sequence

from habit_home.core.geometry import Point3, mean_distance, weighted_term
from habit_home.models.habit import RecommendationSettings
from habit_home.models.recommendation import ScoredCandidate, SurfaceCandidate
from habit_home.models.room import PathPoint


logger = logging.getLogger(__name__)


def score_candidate(
    candidate: SurfaceCandidate,
    path_positions: Sequence[Point3],
    furniture_centers: Sequence[Point3],
    settings: RecommendationSettings,
) -> ScoredCandidate:
    """
    Score a single candidate.

    An empty path or furniture set gives an infinite mean distance for
    that term; a zero weight drops the term entirely, so the score stays
    finite as long as the weighted side has data.
    """
    path_distance = mean_distance(candidate.world_center, path_positions)
    furniture_distance = mean_distance(candidate.world_center, furniture_centers)
    score = (
        weighted_term(path_distance, settings.path_weight)
        + weighted_term(furniture_distance, settings.furniture_weight)
    )
    return ScoredCandidate(
        candidate=candidate,
        path_distance=path_distance,
        furniture_distance=furniture_distance,
        score=score,
    )


def score_candidates(
    candidates: Sequence[SurfaceCandidate],
    path_points: Sequence[PathPoint],
    furniture_centers: Sequence[Point3],
    settings: RecommendationSettings,
) -> List[ScoredCandidate]:
    """
    Score every candidate; output order matches input order.

    Path points are treated as an unordered sample set, so timestamps and
    confidence do not affect the result.
    """
    positions = [point.position for point in path_points]
    scored = []
    for candidate in candidates:
        result = score_candidate(candidate, positions, furniture_centers, settings)
        logger.debug(
            "object_%d | path %.4f | furniture %.4f | score %.4f",
            candidate.source_object_index,
            result.path_distance,
            result.furniture_distance,
            result.score,
        )
        scored.append(result)
    return scored
