"""Sign-up, sign-in and auth state observation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from calorie_coach.domain.identity import AuthSession, AuthUser

AuthListener = Callable[[AuthUser | None], None]

_logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    """Interface for the external identity provider."""

    def sign_up(self, email: str, password: str) -> AuthSession:
        """Create an account and return the resulting session."""

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Authenticate with email and password."""

    def sign_out(self) -> None:
        """End the provider session."""

    def revoke(self, access_token: str) -> None:
        """Invalidate one access token's session."""

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user an access token belongs to."""

    def update_display_name(self, user_id: str, display_name: str) -> AuthUser:
        """Store a display name on the provider's user record."""


@dataclass
class IdentityService:
    """Track the signed-in user and notify listeners on transitions.

    Provider errors are raised to the caller unchanged.
    """

    provider: IdentityProvider
    _session: AuthSession | None = field(default=None, init=False)
    _listeners: list[AuthListener] = field(default_factory=list, init=False)

    def register(self, email: str, password: str) -> AuthSession:
        """Create an account; signs the user in when the provider allows it."""
        session = self.provider.sign_up(email, password)
        if session.access_token:
            self._set_session(session)
        return session

    def login(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password."""
        session = self.provider.sign_in(email, password)
        self._set_session(session)
        return session

    def logout(self) -> None:
        """Sign out the current user."""
        self.provider.sign_out()
        self._set_session(None)

    def logout_token(self, access_token: str, user_id: str) -> None:
        """End the session behind a bearer token.

        The tracked session is only cleared when it belongs to ``user_id``.
        """
        self.provider.revoke(access_token)
        if self._session and self._session.user.id == user_id:
            self.logout()

    def current_user(self) -> AuthUser | None:
        """Return the signed-in user, if any."""
        return self._session.user if self._session else None

    def user_for_token(self, access_token: str) -> AuthUser | None:
        """Resolve a bearer token to its user."""
        return self.provider.get_user(access_token)

    def update_display_name(self, user_id: str, display_name: str) -> AuthUser:
        """Rename a user and refresh the tracked session when it matches."""
        user = self.provider.update_display_name(user_id, display_name)
        if self._session and self._session.user.id == user.id:
            self._session = AuthSession(
                user=user,
                access_token=self._session.access_token,
                refresh_token=self._session.refresh_token,
            )
        return user

    def on_change(self, listener: AuthListener) -> Callable[[], None]:
        """Subscribe to auth state; the listener fires immediately."""
        self._listeners.append(listener)
        _notify(listener, self.current_user())

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_session(self, session: AuthSession | None) -> None:
        self._session = session
        user = self.current_user()
        for listener in list(self._listeners):
            _notify(listener, user)


def _notify(listener: AuthListener, user: AuthUser | None) -> None:
    try:
        listener(user)
    except Exception:
        _logger.exception("Auth state listener failed")
