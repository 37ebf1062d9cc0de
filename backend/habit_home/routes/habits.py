"""
Habits Route

GET /habits           - The built-in habit catalogue.
GET /habits/{habit_id} - One catalogue habit.
"""

from uuid import UUID

from fastapi import APIRouter, HTTPException

from habit_home.models.api import ErrorResponse, HabitListResponse
from habit_home.models.habit import SAMPLE_HABITS, Habit, find_habit


router = APIRouter(prefix="/habits", tags=["Habits"])


@router.get("", response_model=HabitListResponse)
async def list_habits() -> HabitListResponse:
    """List catalogue habits with their default furniture categories."""
    return HabitListResponse(habits=SAMPLE_HABITS)


@router.get("/{habit_id}", response_model=Habit, responses={404: {"model": ErrorResponse}})
async def get_habit(habit_id: UUID) -> Habit:
    habit = find_habit(habit_id)
    if habit is None:
        raise HTTPException(status_code=404, detail=f"Unknown habit: {habit_id}")
    return habit
