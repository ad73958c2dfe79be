"""Dashboard widget endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends

from calorie_coach.api.dependencies import current_profile
from calorie_coach.domain.profiles import UserProfile
from calorie_coach.services.dashboard import (
    SAMPLE_TODAY,
    SAMPLE_WEEK,
    DailyIntake,
    build_progress,
    build_summary,
    goal_progress,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary")
async def summary(
    calories: float = SAMPLE_TODAY.calories,
    protein: float = SAMPLE_TODAY.protein,
    carbs: float = SAMPLE_TODAY.carbs,
    fat: float = SAMPLE_TODAY.fat,
    profile: UserProfile = Depends(current_profile),
) -> dict[str, object]:
    """Return calorie and macro progress for today."""
    intake = DailyIntake("Today", calories, protein, carbs, fat)
    return asdict(build_summary(profile, intake))


@router.get("/progress")
async def progress(
    time_range: str = "week",
    current: float = 75,
    target: float = 100,
    profile: UserProfile = Depends(current_profile),
) -> dict[str, object]:
    """Return chart data for the progress widgets."""
    charts = build_progress(
        SAMPLE_WEEK,
        goal_progress(profile.fitness_goal, current, target),
        time_range=time_range,
    )
    return asdict(charts)
