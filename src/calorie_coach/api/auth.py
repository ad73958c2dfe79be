"""Authentication and session routing endpoints."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from calorie_coach.api.dependencies import (
    access_token,
    get_container,
    optional_user,
    require_user,
)
from calorie_coach.api.models import Credentials, DisplayNameRequest, RegisterRequest
from calorie_coach.containers import AppContainer
from calorie_coach.domain.identity import AuthSession, AuthUser
from calorie_coach.domain.routing import resolve_route
from calorie_coach.services.session import session_state_for

router = APIRouter(tags=["auth"])

_logger = logging.getLogger(__name__)


@router.post("/auth/register")
async def register(
    payload: RegisterRequest,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Create an account and its default goal profile.

    A failed display name update keeps the account with an email-only profile.
    """
    try:
        session = container.identity_service.register(payload.email, payload.password)
    except Exception as exc:
        _logger.exception("Registration failed")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    user = session.user
    profile = container.profile_service.create(
        user.id,
        {"email": user.email, "display_name": user.display_name},
    )
    if payload.display_name:
        try:
            user = container.identity_service.update_display_name(
                user.id, payload.display_name
            )
        except Exception:
            _logger.exception(
                "Display name update failed after sign-up", extra={"user_id": user.id}
            )
        else:
            profile = container.profile_service.create(
                user.id, {"display_name": user.display_name}
            )
    return {**_session_payload(session, user), "profile": profile}


@router.post("/auth/login")
async def login(
    payload: Credentials,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Sign in with email and password."""
    try:
        session = container.identity_service.login(payload.email, payload.password)
    except Exception as exc:
        _logger.warning("Login failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)
        ) from exc
    return _session_payload(session, session.user)


@router.post("/auth/logout")
async def logout(
    user: AuthUser = Depends(require_user),
    token: str | None = Depends(access_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Sign out the caller's session."""
    try:
        container.identity_service.logout_token(token or "", user.id)
    except Exception as exc:
        _logger.exception("Logout failed", extra={"user_id": user.id})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return {"status": "ok"}


@router.put("/auth/display-name")
async def update_display_name(
    payload: DisplayNameRequest,
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Rename the signed-in user."""
    try:
        updated = container.identity_service.update_display_name(
            user.id, payload.display_name
        )
    except Exception as exc:
        _logger.exception("Display name update failed", extra={"user_id": user.id})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    container.profile_service.update(user.id, {"display_name": updated.display_name})
    return {"user": asdict(updated)}


@router.get("/session/route")
async def session_route(
    path: str = "/",
    user: AuthUser | None = Depends(optional_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Resolve the view a client may show for the requested path."""
    state = session_state_for(container.profile_service, user)
    decision = resolve_route(state, path, container.settings.dev_routes_enabled)
    return {**asdict(decision), "redirected": decision.redirected}


@router.get("/session")
async def session_state(
    path: str = "/",
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's session state and the view for ``path``."""
    state = session_state_for(container.profile_service, user)
    decision = resolve_route(state, path, container.settings.dev_routes_enabled)
    return {
        "state": state,
        "user": asdict(user),
        "route": {**asdict(decision), "redirected": decision.redirected},
    }


def _session_payload(session: AuthSession, user: AuthUser) -> dict[str, object]:
    return {
        "user": asdict(user),
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
    }
