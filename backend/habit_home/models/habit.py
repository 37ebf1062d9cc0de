"""
Habit Data Models

Habit-side inputs to the placement core: which furniture a habit is tied
to, and how strongly the recommendation leans toward that furniture versus
the user's movement path.
"""

from enum import Enum
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from habit_home.models.room import ObjectCategory, coerce_category


BIAS_MIN = 0.0
BIAS_MAX = 10.0


class HabitCategory(str, Enum):
    ACTIVITY = "Activity"
    DIET = "Diet"
    SLEEP = "Sleep"
    CUSTOM = "Custom"


class HabitFurnitureSpec(BaseModel):
    """
    Furniture a habit is associated with.

    Explicit object indices take priority: when any are present the
    category list is ignored entirely.
    """
    model_config = ConfigDict(frozen=True)

    associated_furniture_indices: List[int] = Field(
        default_factory=list, description="Indices into RoomModel.objects"
    )
    associated_furniture_types: List[ObjectCategory] = Field(
        default_factory=list, description="Categories to match when no indices are given"
    )

    @field_validator("associated_furniture_types", mode="before")
    @classmethod
    def _coerce_types(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            return [coerce_category(v) for v in value]
        return value

    @property
    def uses_indices(self) -> bool:
        return bool(self.associated_furniture_indices)


class RecommendationSettings(BaseModel):
    """
    Weight pair for the two distance terms.

    After ``normalized()`` the weights always sum to 1.
    """
    model_config = ConfigDict(frozen=True)

    path_weight: float = Field(default=0.5, ge=0, le=1)
    furniture_weight: float = Field(default=0.5, ge=0, le=1)

    @classmethod
    def from_bias(cls, bias: float) -> "RecommendationSettings":
        """
        Derive weights from the 0-10 bias slider.

        ``furniture_weight = b / 10`` and ``path_weight = (10 - b) / 10``;
        out-of-range bias values are clamped.
        """
        b = clamp_bias(bias)
        return cls(
            path_weight=(BIAS_MAX - b) / BIAS_MAX,
            furniture_weight=b / BIAS_MAX,
        ).normalized()

    def normalized(self) -> "RecommendationSettings":
        total = self.path_weight + self.furniture_weight
        if total <= 1e-5:
            return RecommendationSettings(path_weight=0.5, furniture_weight=0.5)
        return RecommendationSettings(
            path_weight=self.path_weight / total,
            furniture_weight=self.furniture_weight / total,
        )


def clamp_bias(bias: float) -> float:
    return max(BIAS_MIN, min(BIAS_MAX, float(bias)))


def bias_label(bias: float) -> str:
    """
    Human-readable description of a slider position.

    Example:
        >>> bias_label(5)
        'Balanced (50/50)'
        >>> bias_label(2)
        '80% Camera Path'
    """
    b = clamp_bias(bias)
    if b == 5:
        return "Balanced (50/50)"
    if b.is_integer():
        if b < 5:
            return f"{int(100 - b * 10)}% Camera Path"
        return f"{int(b * 10)}% Furniture"
    return f"Custom ({int(b * 10)}% Furniture)"


class Habit(BaseModel):
    """A habit from the built-in catalogue."""
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    description: str
    category: HabitCategory
    associated_object: str
    icon_name: str
    associated_furniture_types: List[ObjectCategory] = Field(default_factory=list)

    def furniture_spec(self) -> HabitFurnitureSpec:
        return HabitFurnitureSpec(associated_furniture_types=self.associated_furniture_types)


SAMPLE_HABITS: List[Habit] = [
    Habit(
        id=UUID("550e8400-e29b-41d4-a716-446655440001"),
        name="Consistent Hydration",
        description="Keep your water bottle on the highlighted surface within easy reach.",
        category=HabitCategory.DIET,
        associated_object="Water Bottle",
        icon_name="drop.fill",
        associated_furniture_types=[ObjectCategory.BED, ObjectCategory.SOFA, ObjectCategory.CHAIR],
    ),
    Habit(
        id=UUID("550e8400-e29b-41d4-a716-446655440002"),
        name="Healthy Snacking",
        description="Put a fruit bowl on the highlighted surface in your kitchen area.",
        category=HabitCategory.DIET,
        associated_object="Fruit Bowl",
        icon_name="leaf.fill",
        associated_furniture_types=[ObjectCategory.REFRIGERATOR, ObjectCategory.OVEN],
    ),
    Habit(
        id=UUID("550e8400-e29b-41d4-a716-446655440003"),
        name="Daily Movement Cue",
        description="Leave a yoga block or resistance band where you relax as a reminder to move.",
        category=HabitCategory.ACTIVITY,
        associated_object="Yoga Block Set",
        icon_name="figure.yoga",
        associated_furniture_types=[ObjectCategory.TELEVISION, ObjectCategory.SOFA],
    ),
    Habit(
        id=UUID("550e8400-e29b-41d4-a716-446655440004"),
        name="Workout Essentials",
        description="Set out your workout kit near your bed so leaving in the morning is effortless.",
        category=HabitCategory.ACTIVITY,
        associated_object="Essentials Tray",
        icon_name="figure.run",
        associated_furniture_types=[ObjectCategory.BED, ObjectCategory.CHAIR],
    ),
    Habit(
        id=UUID("550e8400-e29b-41d4-a716-446655440005"),
        name="Tech-Free Reading",
        description="Keep your current book beside your bed to choose reading over screens.",
        category=HabitCategory.SLEEP,
        associated_object="Physical Book",
        icon_name="book.fill",
        associated_furniture_types=[ObjectCategory.BED],
    ),
    Habit(
        id=UUID("550e8400-e29b-41d4-a716-446655440006"),
        name="Calming Bedtime Tea",
        description="Set up your tea canister and mug near the kitchen water source.",
        category=HabitCategory.SLEEP,
        associated_object="Tea Set",
        icon_name="cup.and.saucer.fill",
        associated_furniture_types=[ObjectCategory.SINK, ObjectCategory.STOVE, ObjectCategory.OVEN],
    ),
]


def find_habit(habit_id: UUID) -> Optional[Habit]:
    """Look up a catalogue habit by id."""
    for habit in SAMPLE_HABITS:
        if habit.id == habit_id:
            return habit
    return None
