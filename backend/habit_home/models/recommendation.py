"""
Recommendation Data Models

Values produced by the placement pipeline. Every stage creates new
instances from its inputs; none are stored between requests.
"""

import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from habit_home.core.geometry import Point3
from habit_home.models.habit import RecommendationSettings


class SurfaceCandidate(BaseModel):
    """
    A room object's top face accepted as a placement surface.

    Attributes:
        source_object_index: Index of the source object in RoomModel.objects
        world_center: Center of the object's top face in world space
    """
    model_config = ConfigDict(frozen=True)

    source_object_index: int = Field(..., ge=0)
    world_center: Point3


class ScoredCandidate(BaseModel):
    """A candidate with its two mean distances and combined score (lower is better)."""
    model_config = ConfigDict(frozen=True)

    candidate: SurfaceCandidate
    path_distance: float = Field(..., ge=0)
    furniture_distance: float = Field(..., ge=0)
    score: float = Field(..., ge=0)

    @property
    def source_object_index(self) -> int:
        return self.candidate.source_object_index


class RecommendationResult(BaseModel):
    """Best and second-best surfaces; both None when nothing qualifies."""
    model_config = ConfigDict(frozen=True)

    best: Optional[ScoredCandidate] = None
    second_best: Optional[ScoredCandidate] = None

    @computed_field
    @property
    def score_difference(self) -> Optional[float]:
        """How much worse the runner-up scores than the best surface."""
        if self.best is None or self.second_best is None:
            return None
        difference = self.second_best.score - self.best.score
        return difference if math.isfinite(difference) else None

    @computed_field
    @property
    def score_difference_percent(self) -> Optional[float]:
        difference = self.score_difference
        if difference is None or self.best.score == 0:
            return None
        return difference / self.best.score * 100


class IssueCode(str, Enum):
    NO_CANDIDATE_SURFACES = "NO_CANDIDATE_SURFACES"
    NO_ASSOCIATED_FURNITURE = "NO_ASSOCIATED_FURNITURE"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"


class RecommendationIssue(BaseModel):
    """A recoverable problem found while computing a recommendation."""
    code: IssueCode
    description: str = Field(..., description="Human-readable explanation")
    severity: str = Field(default="warning", description="'error' or 'warning'")
    object_indices: List[int] = Field(default_factory=list, description="Object indices involved")


class RecommendationReport(BaseModel):
    """Everything one pipeline run produced, for display and diagnostics."""
    model_config = ConfigDict(frozen=True)

    result: RecommendationResult
    settings: RecommendationSettings
    candidates: List[ScoredCandidate] = Field(default_factory=list)
    furniture_centers: List[Point3] = Field(default_factory=list)
    issues: List[RecommendationIssue] = Field(default_factory=list)

    @property
    def has_recommendation(self) -> bool:
        return self.result.best is not None
