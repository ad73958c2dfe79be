"""Goal profile endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from calorie_coach.api.dependencies import get_container, require_user
from calorie_coach.api.models import ProfileSetupRequest
from calorie_coach.containers import AppContainer
from calorie_coach.domain.identity import AuthUser
from calorie_coach.domain.profiles import FitnessGoal, GoalPreset, UserProfile
from calorie_coach.domain.routing import resolve_route
from calorie_coach.services.profiles import goal_preset
from calorie_coach.services.session import session_state_for

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserProfile:
    """Return the signed-in user's profile."""
    profile = container.profile_service.get(user.id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return profile


@router.put("")
async def save_profile(
    payload: ProfileSetupRequest,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Store the goals submitted by the profile setup form."""
    container.profile_service.update(user.id, payload.model_dump())
    current = container.identity_service.current_user()
    if current is not None and current.id == user.id:
        container.session_controller.refresh()
    state = session_state_for(container.profile_service, user)
    decision = resolve_route(state, "/", container.settings.dev_routes_enabled)
    return {
        "status": "ok",
        "profile": container.profile_service.get(user.id),
        "route": {**asdict(decision), "redirected": decision.redirected},
    }


@router.get("/presets/{goal}")
async def get_preset(goal: FitnessGoal) -> GoalPreset:
    """Return the suggested targets for a fitness goal."""
    return goal_preset(goal)
