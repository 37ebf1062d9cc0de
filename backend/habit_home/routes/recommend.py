"""
Recommend Route

POST /recommend       - Best and second-best placement surface for a habit.
POST /recommend/sweep - The same recommendation at every bias position.
"""

import logging
import math

from fastapi import APIRouter, Depends, HTTPException

from habit_home.config import Settings, get_settings
from habit_home.core.recommender import recommend, sweep_bias
from habit_home.models.api import (
    ErrorResponse,
    RecommendRequest,
    RecommendResponse,
    SurfaceScore,
    SweepResponse,
    SweepStep,
)
from habit_home.models.habit import HabitFurnitureSpec, bias_label, find_habit


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommend", tags=["Recommendation"])


def _furniture_spec(request: RecommendRequest) -> HabitFurnitureSpec:
    """Explicit furniture wins; otherwise fall back to the catalogue habit's defaults."""
    if request.furniture is not None:
        return request.furniture
    if request.habit_id is not None:
        habit = find_habit(request.habit_id)
        if habit is None:
            raise HTTPException(status_code=404, detail=f"Unknown habit: {request.habit_id}")
        return habit.furniture_spec()
    return HabitFurnitureSpec()


# Plain def handlers run in FastAPI's threadpool, off the event loop.
@router.post("", response_model=RecommendResponse, responses={404: {"model": ErrorResponse}})
def recommend_surface(
    request: RecommendRequest,
    settings: Settings = Depends(get_settings),
) -> RecommendResponse:
    """
    Recommend where to place a habit's object.

    This endpoint:
    1. Extracts table/storage top faces at or below eye level
    2. Resolves the habit's associated furniture
    3. Scores each surface against the movement path and the furniture
    4. Returns the best and second-best surfaces with their scores
    """
    furniture = _furniture_spec(request)
    bias = request.bias if request.bias is not None else settings.default_bias

    try:
        report = recommend(
            request.capture.room,
            request.capture.path_points,
            furniture,
            bias=bias,
            eye_level=settings.eye_level_m,
            surface_thickness=settings.surface_thickness_m,
        )
    except Exception as e:
        logger.exception("Recommendation failed")
        raise HTTPException(
            status_code=500,
            detail=f"Recommendation failed: {str(e)}"
        )

    if report.has_recommendation:
        message = f"Recommended object_{report.result.best.source_object_index}"
    else:
        message = "Could not find a suitable surface for placement"

    result = report.result
    return RecommendResponse(
        best=SurfaceScore.from_scored(result.best) if result.best else None,
        second_best=SurfaceScore.from_scored(result.second_best) if result.second_best else None,
        score_difference=result.score_difference,
        score_difference_percent=result.score_difference_percent,
        settings=report.settings,
        bias=bias,
        bias_label=bias_label(bias),
        candidates=[SurfaceScore.from_scored(c) for c in report.candidates],
        issues=report.issues,
        message=message,
    )


@router.post("/sweep", response_model=SweepResponse, responses={404: {"model": ErrorResponse}})
def sweep_surfaces(
    request: RecommendRequest,
    settings: Settings = Depends(get_settings),
) -> SweepResponse:
    """
    Recommend at every whole bias position from 0 to 10.

    Shows how the choice moves from path-near to furniture-near surfaces.
    The request's own ``bias`` is ignored.
    """
    furniture = _furniture_spec(request)

    try:
        results = sweep_bias(
            request.capture.room,
            request.capture.path_points,
            furniture,
            eye_level=settings.eye_level_m,
            surface_thickness=settings.surface_thickness_m,
        )
    except Exception as e:
        logger.exception("Bias sweep failed")
        raise HTTPException(
            status_code=500,
            detail=f"Bias sweep failed: {str(e)}"
        )

    steps = []
    for bias, result in results:
        best, second = result.best, result.second_best
        steps.append(SweepStep(
            bias=bias,
            bias_label=bias_label(bias),
            best_index=best.source_object_index if best else None,
            second_best_index=second.source_object_index if second else None,
            best_score=best.score if best and math.isfinite(best.score) else None,
        ))
    return SweepResponse(steps=steps)
