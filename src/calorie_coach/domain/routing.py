"""Session states and view routing rules."""

from dataclasses import dataclass
from enum import StrEnum


class SessionState(StrEnum):
    """Top-level state of the signed-in session."""

    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED_INCOMPLETE = "authenticated-incomplete"
    AUTHENTICATED_COMPLETE = "authenticated-complete"


class View(StrEnum):
    """Top-level views the client can render."""

    SPINNER = "spinner"
    LOGIN = "login"
    REGISTER = "register"
    PROFILE_SETUP = "profile-setup"
    HOME = "home"
    STORYBOARD = "storyboard"


HOME_PATH = "/"
LOGIN_PATH = "/login"
REGISTER_PATH = "/register"
PROFILE_SETUP_PATH = "/profile-setup"
STORYBOARD_PREFIX = "/storyboards"

_VIEWS_BY_PATH: dict[str, View] = {
    HOME_PATH: View.HOME,
    LOGIN_PATH: View.LOGIN,
    REGISTER_PATH: View.REGISTER,
    PROFILE_SETUP_PATH: View.PROFILE_SETUP,
}

_ALLOWED_PATHS: dict[SessionState, frozenset[str]] = {
    SessionState.UNAUTHENTICATED: frozenset({LOGIN_PATH, REGISTER_PATH}),
    SessionState.AUTHENTICATED_INCOMPLETE: frozenset({PROFILE_SETUP_PATH}),
    SessionState.AUTHENTICATED_COMPLETE: frozenset({HOME_PATH}),
}

_CANONICAL_PATHS: dict[SessionState, str] = {
    SessionState.UNAUTHENTICATED: LOGIN_PATH,
    SessionState.AUTHENTICATED_INCOMPLETE: PROFILE_SETUP_PATH,
    SessionState.AUTHENTICATED_COMPLETE: HOME_PATH,
}


@dataclass(frozen=True)
class RouteDecision:
    """Outcome of resolving a requested path for a session state."""

    state: SessionState
    requested_path: str
    path: str
    view: View

    @property
    def redirected(self) -> bool:
        """Return True when the client must navigate away from the request."""
        return self.path != self.requested_path


def state_for(user_present: bool, setup_completed: bool) -> SessionState:
    """Return the session state for identity and profile facts."""
    if not user_present:
        return SessionState.UNAUTHENTICATED
    if setup_completed:
        return SessionState.AUTHENTICATED_COMPLETE
    return SessionState.AUTHENTICATED_INCOMPLETE


def resolve_route(
    state: SessionState, path: str, dev_routes_enabled: bool = False
) -> RouteDecision:
    """Resolve a requested path to the view allowed for the state."""
    requested = _normalize_path(path)
    if state == SessionState.LOADING:
        return RouteDecision(state, requested, requested, View.SPINNER)
    if dev_routes_enabled and _is_storyboard_path(requested):
        return RouteDecision(state, requested, requested, View.STORYBOARD)
    if requested in _ALLOWED_PATHS[state]:
        return RouteDecision(state, requested, requested, _VIEWS_BY_PATH[requested])
    target = _CANONICAL_PATHS[state]
    return RouteDecision(state, requested, target, _VIEWS_BY_PATH[target])


def _normalize_path(path: str) -> str:
    cleaned = path.strip().split("?", maxsplit=1)[0].split("#", maxsplit=1)[0]
    if not cleaned.startswith("/"):
        cleaned = f"/{cleaned}"
    if len(cleaned) > 1:
        cleaned = cleaned.rstrip("/") or HOME_PATH
    return cleaned


def _is_storyboard_path(path: str) -> bool:
    return path == STORYBOARD_PREFIX or path.startswith(f"{STORYBOARD_PREFIX}/")
