"""Shared FastAPI dependencies."""

import logging

from fastapi import Depends, Header, HTTPException, Request, status

from calorie_coach.containers import AppContainer
from calorie_coach.domain.identity import AuthUser
from calorie_coach.domain.profiles import UserProfile

_logger = logging.getLogger(__name__)


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def optional_user(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> AuthUser | None:
    """Resolve the bearer token, if any, to a user."""
    token = _bearer_token(authorization)
    if token is None:
        return None
    try:
        return container.identity_service.user_for_token(token)
    except Exception as exc:
        _logger.warning("Rejected access token: %s", exc)
        return None


def access_token(authorization: str | None = Header(default=None)) -> str | None:
    """Return the raw bearer token from the request, if any."""
    return _bearer_token(authorization)


def require_user(user: AuthUser | None = Depends(optional_user)) -> AuthUser:
    """Ensure requests carry a valid bearer token."""
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user


def current_profile(
    user: AuthUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> UserProfile:
    """Return the signed-in user's profile, falling back to defaults."""
    profile = container.profile_service.get(user.id)
    if profile is None:
        return UserProfile(id=user.id, email=user.email, display_name=user.display_name)
    return profile


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
