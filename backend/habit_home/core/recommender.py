"""
Placement Recommender

Runs the full placement pipeline for one habit:

    RoomModel            -> surface candidates
    RoomModel + spec     -> furniture centers
    candidates + path + furniture + weights -> scored candidates
    scored candidates    -> best / second-best

Every call is a pure function of its arguments. Problems such as an empty
room or stale furniture indices are reported as issues on the returned
report rather than raised.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from habit_home.core.furniture import resolve_furniture
from habit_home.core.ranking import rank_candidates, result_from_ranked
from habit_home.core.scoring import score_candidates
from habit_home.core.surfaces import EYE_LEVEL_M, SURFACE_THICKNESS_M, extract_surface_candidates
from habit_home.models.habit import BIAS_MAX, BIAS_MIN, HabitFurnitureSpec, RecommendationSettings
from habit_home.models.recommendation import (
    IssueCode,
    RecommendationIssue,
    RecommendationReport,
    RecommendationResult,
)
from habit_home.models.room import PathPoint, RoomModel


logger = logging.getLogger(__name__)


def recommend(
    room: RoomModel,
    path_points: Sequence[PathPoint],
    furniture: HabitFurnitureSpec,
    settings: Optional[RecommendationSettings] = None,
    *,
    bias: Optional[float] = None,
    eye_level: float = EYE_LEVEL_M,
    surface_thickness: float = SURFACE_THICKNESS_M,
) -> RecommendationReport:
    """
    Recommend a surface for one habit.

    Args:
        room: Captured room snapshot
        path_points: Movement trace recorded during capture
        furniture: The habit's furniture association
        settings: Explicit weight pair; normalized before use
        bias: 0-10 slider position, used when ``settings`` is not given
        eye_level: Highest usable surface height in meters
        surface_thickness: Placement indicator thickness in meters

    Returns:
        RecommendationReport with the result, the weights actually used,
        every scored candidate (ranked) and any issues found
    """
    if settings is not None:
        weights = settings.normalized()
    elif bias is not None:
        weights = RecommendationSettings.from_bias(bias)
    else:
        weights = RecommendationSettings()

    issues: List[RecommendationIssue] = []

    candidates = extract_surface_candidates(room, eye_level, surface_thickness)
    if not candidates:
        logger.info("No suitable surfaces among %d room objects", len(room.objects))
        issues.append(RecommendationIssue(
            code=IssueCode.NO_CANDIDATE_SURFACES,
            description="No table or storage surface at or below eye level",
            severity="error",
        ))

    furniture_centers, skipped = resolve_furniture(room, furniture)
    if skipped:
        issues.append(RecommendationIssue(
            code=IssueCode.INDEX_OUT_OF_RANGE,
            description=f"Skipped {len(skipped)} furniture index(es) not present in this room",
            object_indices=skipped,
        ))
    if not furniture_centers:
        logger.debug("No associated furniture found in the room")
        issues.append(RecommendationIssue(
            code=IssueCode.NO_ASSOCIATED_FURNITURE,
            description="No associated furniture found; furniture distance cannot be measured",
        ))

    scored = score_candidates(candidates, path_points, furniture_centers, weights)
    ranked = rank_candidates(scored)
    result = result_from_ranked(ranked)

    if result.best is not None:
        logger.info(
            "Best surface object_%d (score %.4f); second best %s",
            result.best.source_object_index,
            result.best.score,
            f"object_{result.second_best.source_object_index}" if result.second_best else "none",
        )

    return RecommendationReport(
        result=result,
        settings=weights,
        candidates=ranked,
        furniture_centers=furniture_centers,
        issues=issues,
    )


def sweep_bias(
    room: RoomModel,
    path_points: Sequence[PathPoint],
    furniture: HabitFurnitureSpec,
    step: float = 1.0,
    **kwargs,
) -> List[Tuple[float, RecommendationResult]]:
    """
    Run the pipeline across the whole bias range.

    Biases run from 0 in ``step`` increments; 10 is always the last
    position, even when ``step`` does not divide the range evenly.

    Returns:
        List of (bias, result) pairs from 0 to 10
    """
    if step <= 0:
        raise ValueError("step must be positive")

    biases = []
    i = 0
    while BIAS_MIN + i * step < BIAS_MAX - 1e-9:
        biases.append(BIAS_MIN + i * step)
        i += 1
    biases.append(BIAS_MAX)

    results = []
    for bias in biases:
        report = recommend(room, path_points, furniture, bias=bias, **kwargs)
        results.append((bias, report.result))
    return results
