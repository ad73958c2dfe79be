"""Session state tracking for view routing."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from calorie_coach.domain.identity import AuthUser
from calorie_coach.domain.routing import (
    RouteDecision,
    SessionState,
    resolve_route,
    state_for,
)
from calorie_coach.services.identity import IdentityService
from calorie_coach.services.profiles import ProfileService

_logger = logging.getLogger(__name__)


@dataclass
class SessionController:
    """Derive the session state from identity and profile completion."""

    identity: IdentityService
    profiles: ProfileService
    dev_routes_enabled: bool = False
    state: SessionState = field(default=SessionState.LOADING, init=False)
    user: AuthUser | None = field(default=None, init=False)
    _unsubscribe: Callable[[], None] | None = field(default=None, init=False)

    def start(self) -> None:
        """Subscribe to identity changes; the current state applies at once."""
        if self._unsubscribe is None:
            self._unsubscribe = self.identity.on_change(self._on_identity_change)

    def stop(self) -> None:
        """Stop observing identity changes."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def refresh(self) -> SessionState:
        """Re-read the profile for the current user, e.g. after setup."""
        self._on_identity_change(self.identity.current_user())
        return self.state

    def resolve(self, path: str) -> RouteDecision:
        """Resolve a requested path against the current state."""
        return resolve_route(self.state, path, self.dev_routes_enabled)

    def _on_identity_change(self, user: AuthUser | None) -> None:
        self.user = user
        self.state = session_state_for(self.profiles, user)
        _logger.info("Session state changed to %s", self.state)


def session_state_for(profiles: ProfileService, user: AuthUser | None) -> SessionState:
    """Return the session state for a user, reading their profile."""
    if user is None:
        return state_for(user_present=False, setup_completed=False)
    try:
        profile = profiles.get(user.id)
    except Exception:
        _logger.exception("Failed to load profile", extra={"user_id": user.id})
        profile = None
    return state_for(
        user_present=True,
        setup_completed=bool(profile and profile.setup_completed),
    )
