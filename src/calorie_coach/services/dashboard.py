"""Dashboard summary and progress chart view models."""

import math
from dataclasses import dataclass

from calorie_coach.domain.profiles import UserProfile

WEEK_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True)
class DailyIntake:
    """Calories and macros consumed on one day."""

    label: str
    calories: float
    protein: float
    carbs: float
    fat: float


SAMPLE_TODAY = DailyIntake("Today", calories=1250, protein=75, carbs=150, fat=40)

SAMPLE_WEEK: tuple[DailyIntake, ...] = tuple(
    DailyIntake(label, calories, protein, carbs, fat)
    for label, calories, protein, carbs, fat in zip(
        WEEK_LABELS,
        (1800, 2100, 1950, 2200, 1700, 2300, 2000),
        (120, 130, 125, 140, 110, 150, 135),
        (180, 210, 195, 220, 170, 230, 200),
        (60, 70, 65, 75, 55, 80, 70),
        strict=True,
    )
)


@dataclass(frozen=True)
class MacroProgress:
    """Consumption of one macronutrient against its goal."""

    name: str
    consumed: float
    goal: int
    percentage: int


@dataclass(frozen=True)
class DashboardSummary:
    """Daily calorie and macro progress."""

    fitness_goal: str
    calories_consumed: float
    calories_goal: int
    calories_remaining: float
    calories_percentage: int
    macros: list[MacroProgress]


@dataclass(frozen=True)
class CalorieBar:
    """Bar for one day, sized relative to the largest day."""

    label: str
    value: float
    height_percent: float


@dataclass(frozen=True)
class MacroSplit:
    """Share of each macro in one day's intake, in percent."""

    label: str
    protein_percent: float
    carbs_percent: float
    fat_percent: float


@dataclass(frozen=True)
class GoalProgress:
    """Progress towards the fitness goal."""

    goal_type: str
    current: float
    target: float
    percentage: float


@dataclass(frozen=True)
class ProgressCharts:
    """Data for the progress chart widgets."""

    time_range: str
    calorie_bars: list[CalorieBar]
    macro_splits: list[MacroSplit]
    goal_progress: GoalProgress


def build_summary(profile: UserProfile, intake: DailyIntake) -> DashboardSummary:
    """Compare a day's intake with the profile's goals."""
    macros = [
        MacroProgress(
            name=name,
            consumed=consumed,
            goal=goal,
            percentage=capped_percentage(consumed, goal),
        )
        for name, consumed, goal in (
            ("Protein", intake.protein, profile.macros.protein),
            ("Carbs", intake.carbs, profile.macros.carbs),
            ("Fat", intake.fat, profile.macros.fat),
        )
    ]
    return DashboardSummary(
        fitness_goal=profile.fitness_goal,
        calories_consumed=intake.calories,
        calories_goal=profile.calories_goal,
        calories_remaining=profile.calories_goal - intake.calories,
        calories_percentage=capped_percentage(intake.calories, profile.calories_goal),
        macros=macros,
    )


def build_progress(
    days: tuple[DailyIntake, ...] | list[DailyIntake],
    goal_progress: GoalProgress,
    time_range: str = "week",
) -> ProgressCharts:
    """Size calorie bars and macro splits proportionally."""
    max_calories = max((day.calories for day in days), default=0)
    bars = [
        CalorieBar(
            label=day.label,
            value=day.calories,
            height_percent=_ratio(day.calories, max_calories),
        )
        for day in days
    ]
    splits = []
    for day in days:
        total = day.protein + day.carbs + day.fat
        splits.append(
            MacroSplit(
                label=day.label,
                protein_percent=_ratio(day.protein, total),
                carbs_percent=_ratio(day.carbs, total),
                fat_percent=_ratio(day.fat, total),
            )
        )
    return ProgressCharts(
        time_range=time_range,
        calorie_bars=bars,
        macro_splits=splits,
        goal_progress=goal_progress,
    )


def goal_progress(goal_type: str, current: float, target: float) -> GoalProgress:
    """Return goal progress with its percentage of the target."""
    return GoalProgress(
        goal_type=goal_type,
        current=current,
        target=target,
        percentage=_ratio(current, target),
    )


def capped_percentage(consumed: float, goal: float) -> int:
    """Return consumed/goal as a rounded percentage, capped at 100."""
    if goal <= 0:
        return 0
    return min(math.floor(consumed / goal * 100 + 0.5), 100)


def _ratio(value: float, total: float) -> float:
    if total <= 0:
        return 0.0
    return value / total * 100
