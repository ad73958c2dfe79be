"""Tests for HTTP endpoints."""

from fastapi.testclient import TestClient

from calorie_coach.api.app import create_app
from calorie_coach.domain.errors import TransportError
from tests.conftest import (
    FakeCompletionClient,
    FakeIdentityProvider,
    InMemoryDocumentStore,
)


def _auth(user_id: str = "user-1") -> dict[str, str]:
    return {"Authorization": f"Bearer token-{user_id}"}


def _signed_up(identity_provider: FakeIdentityProvider) -> None:
    identity_provider.add_account("a@example.com", "secret", "user-1")


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_register_creates_default_profile(
    container, document_store: InMemoryDocumentStore
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/auth/register",
        json={"email": "new@example.com", "password": "secret", "display_name": "Sam"},
    )

    assert response.status_code == 200
    data = response.json()
    user_id = data["user"]["id"]
    assert data["access_token"] == f"token-{user_id}"
    assert data["profile"]["display_name"] == "Sam"
    assert document_store.documents[user_id]["setup_completed"] is False
    assert document_store.documents[user_id]["calories_goal"] == 2000


def test_register_duplicate_returns_provider_message(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    client = TestClient(create_app(container))

    response = client.post(
        "/auth/register", json={"email": "a@example.com", "password": "secret"}
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "User already registered"


def test_login_failure_is_unauthorized(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/auth/login", json={"email": "a@example.com", "password": "wrong"}
    )

    assert response.status_code == 401


def test_login_updates_session_controller(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    with TestClient(create_app(container)) as client:
        login = client.post(
            "/auth/login", json={"email": "a@example.com", "password": "secret"}
        )
        token = login.json()["access_token"]
        state = client.get(
            "/session",
            params={"path": "/"},
            headers={"Authorization": f"Bearer {token}"},
        ).json()

    assert login.status_code == 200
    assert container.session_controller.state == "authenticated-incomplete"
    assert state["state"] == "authenticated-incomplete"
    assert state["user"]["id"] == "user-1"
    assert state["route"]["view"] == "profile-setup"


def test_session_and_logout_require_token(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    with TestClient(create_app(container)) as client:
        client.post("/auth/login", json={"email": "a@example.com", "password": "secret"})

        session = client.get("/session")
        logout = client.post("/auth/logout")

    assert session.status_code == 401
    assert logout.status_code == 401
    assert identity_provider.signed_out == 0
    assert container.identity_service.current_user() is not None


def test_logout_revokes_only_the_callers_token(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    identity_provider.add_account("b@example.com", "secret", "user-2")
    with TestClient(create_app(container)) as client:
        client.post("/auth/login", json={"email": "a@example.com", "password": "secret"})

        logout = client.post("/auth/logout", headers=_auth("user-2"))
        after = client.get("/profile", headers=_auth("user-2"))

    assert logout.status_code == 200
    assert identity_provider.revoked == ["token-user-2"]
    assert after.status_code == 401
    current = container.identity_service.current_user()
    assert current is not None and current.id == "user-1"


def test_register_keeps_profile_when_rename_fails(
    container,
    identity_provider: FakeIdentityProvider,
    document_store: InMemoryDocumentStore,
) -> None:
    identity_provider.rename_error = ValueError("metadata update failed")
    client = TestClient(create_app(container))

    response = client.post(
        "/auth/register",
        json={"email": "new@example.com", "password": "secret", "display_name": "Sam"},
    )

    assert response.status_code == 200
    user_id = response.json()["user"]["id"]
    assert response.json()["profile"]["display_name"] is None
    assert document_store.documents[user_id]["email"] == "new@example.com"


def test_session_route_without_token_goes_to_login(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/session/route", params={"path": "/"})

    assert response.json()["view"] == "login"
    assert response.json()["redirected"] is True


def test_profile_setup_completes_routing(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    client = TestClient(create_app(container))

    before = client.get(
        "/session/route", params={"path": "/"}, headers=_auth()
    ).json()
    saved = client.put(
        "/profile",
        headers=_auth(),
        json={
            "fitness_goal": "cutting",
            "calories_goal": 1800,
            "macros": {"protein": 150, "carbs": 150, "fat": 50},
        },
    )
    after = client.get(
        "/session/route", params={"path": "/login"}, headers=_auth()
    ).json()

    assert before["view"] == "profile-setup"
    assert saved.status_code == 200
    assert saved.json()["profile"]["setup_completed"] is True
    assert saved.json()["route"]["view"] == "home"
    assert after["view"] == "home"
    assert after["path"] == "/"


def test_profile_setup_rejects_non_positive_calories(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    client = TestClient(create_app(container))

    response = client.put(
        "/profile",
        headers=_auth(),
        json={
            "fitness_goal": "cutting",
            "calories_goal": 0,
            "macros": {"protein": 150, "carbs": 150, "fat": 50},
        },
    )

    assert response.status_code == 422


def test_profile_requires_token(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/profile").status_code == 401
    assert client.get("/profile", headers=_auth("nobody")).status_code == 401


def test_get_profile_missing_returns_404(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    client = TestClient(create_app(container))

    assert client.get("/profile", headers=_auth()).status_code == 404


def test_goal_preset_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/profile/presets/cutting")

    assert response.json()["calories_goal"] == 1800


def test_analyze_food_returns_item(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    client = TestClient(create_app(container))

    response = client.post("/foods/analyze", headers=_auth(), json={"query": "apple"})

    data = response.json()
    assert response.status_code == 200
    assert data["retry_suggested"] is False
    assert data["item"]["id"].startswith("ai-")
    assert data["result"]["category"] == "cutting"


def test_analyze_food_fallback_suggests_retry(
    container,
    identity_provider: FakeIdentityProvider,
    completion_client: FakeCompletionClient,
) -> None:
    _signed_up(identity_provider)
    completion_client.text = "Sorry, no idea."
    client = TestClient(create_app(container))

    response = client.post("/foods/analyze", headers=_auth(), json={"query": "zzz"})

    data = response.json()
    assert data["retry_suggested"] is True
    assert data["item"] is None
    assert data["result"]["name"] == "zzz"


def test_analyze_food_rejects_blank_query(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    client = TestClient(create_app(container))

    response = client.post("/foods/analyze", headers=_auth(), json={"query": "   "})

    assert response.status_code == 422


def test_transport_error_maps_to_bad_gateway(
    container,
    identity_provider: FakeIdentityProvider,
    completion_client: FakeCompletionClient,
) -> None:
    _signed_up(identity_provider)
    completion_client.error = TransportError("timeout")
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/analyze", headers=_auth(), json={"description": "pasta"}
    )

    assert response.status_code == 502
    assert response.json()["retry"] is True


def test_meal_analyze_uses_profile_goal(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    container.profile_service.update("user-1", {"fitness_goal": "bulking"})
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/analyze", headers=_auth(), json={"description": "an apple"}
    )

    data = response.json()
    assert data["user_goal"] == "bulking"
    assert data["aligned"] is False
    assert data["message"] == "Not ideal for bulking"


def test_search_and_recommendations(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    client = TestClient(create_app(container))

    search = client.get("/foods/search", params={"q": "salmon"}, headers=_auth())
    recs = client.get(
        "/foods/recommendations",
        params={"remaining_calories": 800},
        headers=_auth(),
    )

    assert [item["name"] for item in search.json()["items"]] == ["Salmon"]
    assert recs.json()["remaining_calories"] == 800
    assert recs.json()["active_tab"] == "health"


def test_dashboard_summary_and_progress(
    container, identity_provider: FakeIdentityProvider
) -> None:
    _signed_up(identity_provider)
    client = TestClient(create_app(container))

    summary = client.get("/dashboard/summary", headers=_auth()).json()
    progress = client.get("/dashboard/progress", headers=_auth()).json()

    assert summary["calories_remaining"] == 750
    assert len(progress["calorie_bars"]) == 7
    assert progress["goal_progress"]["percentage"] == 75


def test_dev_routes_disabled_by_default(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/dev/storyboards").status_code == 404


def test_dev_routes_when_enabled(container) -> None:
    container.settings.dev_routes_enabled = True
    client = TestClient(create_app(container))

    response = client.get("/dev/storyboards")

    assert response.status_code == 200
    assert "storyboard" in response.json()["views"]
