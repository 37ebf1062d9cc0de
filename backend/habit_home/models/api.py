"""
API Request/Response Schemas

Pydantic models for API endpoints.
"""

import math
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from habit_home.core.geometry import Point3
from habit_home.models.habit import Habit, HabitFurnitureSpec, RecommendationSettings
from habit_home.models.recommendation import RecommendationIssue, ScoredCandidate
from habit_home.models.room import RoomCapture


# ============ Habits Endpoint ============

class HabitListResponse(BaseModel):
    """Response from /habits endpoint."""
    habits: List[Habit]


# ============ Recommend Endpoint ============

class RecommendRequest(BaseModel):
    """Request body for /recommend endpoints."""
    capture: RoomCapture = Field(..., description="Room scan with its movement trace")
    habit_id: Optional[UUID] = Field(None, description="Catalogue habit supplying default furniture")
    furniture: Optional[HabitFurnitureSpec] = Field(None, description="Explicit furniture association")
    bias: Optional[float] = Field(None, ge=0, le=10, description="0 = path only, 10 = furniture only")


def _finite(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


class SurfaceScore(BaseModel):
    """
    One scored surface as shown to clients.

    Distances that cannot be measured (no path points, no associated
    furniture) are reported as null.
    """
    source_object_index: int
    world_center: Point3
    path_distance: Optional[float] = None
    furniture_distance: Optional[float] = None
    score: Optional[float] = None

    @classmethod
    def from_scored(cls, scored: ScoredCandidate) -> "SurfaceScore":
        return cls(
            source_object_index=scored.source_object_index,
            world_center=scored.candidate.world_center,
            path_distance=_finite(scored.path_distance),
            furniture_distance=_finite(scored.furniture_distance),
            score=_finite(scored.score),
        )


class RecommendResponse(BaseModel):
    """Response from /recommend endpoint."""
    best: Optional[SurfaceScore] = None
    second_best: Optional[SurfaceScore] = None
    score_difference: Optional[float] = Field(None, description="Runner-up score minus best score")
    score_difference_percent: Optional[float] = None
    settings: RecommendationSettings
    bias: float
    bias_label: str
    candidates: List[SurfaceScore] = Field(default_factory=list, description="All candidates, ranked")
    issues: List[RecommendationIssue] = Field(default_factory=list)
    message: str = "Recommendation complete"


class SweepStep(BaseModel):
    """Best and second-best surface at one bias position."""
    bias: float
    bias_label: str
    best_index: Optional[int] = None
    second_best_index: Optional[int] = None
    best_score: Optional[float] = None


class SweepResponse(BaseModel):
    """Response from /recommend/sweep endpoint."""
    steps: List[SweepStep]


# ============ Health Check ============

class HealthResponse(BaseModel):
    """Response from /health endpoint."""
    status: str = "ok"
    version: str
    message: str = "Habit Home Placement API is running"


# ============ Error Response ============

class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str
    error_code: Optional[str] = None
    context: Optional[dict] = None
