"""Identity domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthUser:
    """Authenticated user as exposed by the identity provider."""

    id: str
    email: str | None = None
    display_name: str | None = None


@dataclass(frozen=True)
class AuthSession:
    """Signed-in user together with the provider's access token."""

    user: AuthUser
    access_token: str | None
    refresh_token: str | None = None
