"""Pydantic models for API request payloads."""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from calorie_coach.domain.foods import FoodAnalysisResult
from calorie_coach.domain.profiles import FitnessGoal, Macros

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Credentials(BaseModel):
    """Email and password sign-in payload."""

    email: NonBlankStr
    password: str = Field(min_length=1)


class RegisterRequest(Credentials):
    """Account creation payload."""

    display_name: str | None = None


class DisplayNameRequest(BaseModel):
    """Display name change payload."""

    display_name: NonBlankStr


class ProfileSetupRequest(BaseModel):
    """Goal profile submitted by the setup form."""

    fitness_goal: FitnessGoal
    calories_goal: int = Field(gt=0)
    macros: Macros
    setup_completed: bool = True


class AnalyzeFoodRequest(BaseModel):
    """Free-text food to analyze."""

    query: NonBlankStr


class AnalyzeMealRequest(BaseModel):
    """Free-text meal description to analyze."""

    description: NonBlankStr


class EvaluateMealRequest(BaseModel):
    """Analyzed meal to judge against a goal."""

    meal: FoodAnalysisResult
    user_goal: FitnessGoal | None = None
