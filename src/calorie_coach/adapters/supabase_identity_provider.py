"""Supabase Auth identity provider."""

from dataclasses import dataclass
from typing import Any

from supabase import Client

from calorie_coach.domain.identity import AuthSession, AuthUser
from calorie_coach.services.identity import IdentityProvider


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Identity provider backed by Supabase Auth.

    ``client`` uses the anon key for end-user flows, ``admin_client`` the
    service key for user metadata updates.
    """

    client: Client
    admin_client: Client

    def sign_up(self, email: str, password: str) -> AuthSession:
        """Create a Supabase account."""
        response = self.client.auth.sign_up({"email": email, "password": password})
        return _to_session(response)

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password."""
        response = self.client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )
        return _to_session(response)

    def sign_out(self) -> None:
        """Sign out the client session."""
        self.client.auth.sign_out()

    def revoke(self, access_token: str) -> None:
        """Revoke the session an access token was issued for."""
        self.admin_client.auth.admin.sign_out(access_token, "local")

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user for an access token."""
        response = self.client.auth.get_user(access_token)
        if response is None or response.user is None:
            return None
        return _to_user(response.user)

    def update_display_name(self, user_id: str, display_name: str) -> AuthUser:
        """Store the display name in the user's metadata."""
        response = self.admin_client.auth.admin.update_user_by_id(
            user_id, {"user_metadata": {"display_name": display_name}}
        )
        return _to_user(response.user)


def _to_session(response: Any) -> AuthSession:
    user = getattr(response, "user", None)
    if user is None:
        raise RuntimeError("Supabase returned no user for the auth request")
    session = getattr(response, "session", None)
    return AuthSession(
        user=_to_user(user),
        access_token=getattr(session, "access_token", None),
        refresh_token=getattr(session, "refresh_token", None),
    )


def _to_user(user: Any) -> AuthUser:
    metadata = getattr(user, "user_metadata", None) or {}
    display_name = metadata.get("display_name") or metadata.get("full_name")
    return AuthUser(
        id=str(user.id),
        email=getattr(user, "email", None),
        display_name=display_name,
    )
