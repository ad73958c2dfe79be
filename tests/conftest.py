"""Shared test fixtures."""

import copy
from dataclasses import dataclass, field

import pytest

from calorie_coach.config import Settings
from calorie_coach.containers import AppContainer
from calorie_coach.domain.identity import AuthSession, AuthUser
from calorie_coach.services.analysis import CompletionClient, FoodAnalysisService
from calorie_coach.services.foods import FoodCatalogService
from calorie_coach.services.identity import IdentityProvider, IdentityService
from calorie_coach.services.meals import MealService
from calorie_coach.services.profiles import DocumentStore, ProfileService
from calorie_coach.services.session import SessionController

APPLE_JSON = (
    '{"name":"Apple","calories":95,"protein":0.5,"carbs":25,"fat":0.3,'
    '"category":"cutting","reasoning":"low calorie"}'
)


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client returning a fixed text."""

    text: str = APPLE_JSON
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def generate(self, *, model: str, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@dataclass
class InMemoryDocumentStore(DocumentStore):
    """In-memory document store for tests."""

    documents: dict[str, dict[str, object]] = field(default_factory=dict)
    writes: list[tuple[str, str, dict[str, object]]] = field(default_factory=list)

    def get(self, key: str) -> dict[str, object] | None:
        document = self.documents.get(key)
        return copy.deepcopy(document) if document is not None else None

    def set(self, key: str, document: dict[str, object]) -> None:
        self.writes.append(("set", key, document))
        self.documents[key] = copy.deepcopy(document)

    def update(self, key: str, partial: dict[str, object]) -> None:
        self.writes.append(("update", key, partial))
        self.documents.setdefault(key, {}).update(copy.deepcopy(partial))

    def exists(self, key: str) -> bool:
        return key in self.documents


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Fake identity provider with in-memory accounts."""

    accounts: dict[str, tuple[str, AuthUser]] = field(default_factory=dict)
    tokens: dict[str, AuthUser] = field(default_factory=dict)
    signed_out: int = 0
    revoked: list[str] = field(default_factory=list)
    rename_error: Exception | None = None

    def add_account(self, email: str, password: str, user_id: str) -> AuthUser:
        user = AuthUser(id=user_id, email=email)
        self.accounts[email] = (password, user)
        self.tokens[f"token-{user_id}"] = user
        return user

    def sign_up(self, email: str, password: str) -> AuthSession:
        if email in self.accounts:
            raise ValueError("User already registered")
        user = self.add_account(email, password, f"user-{len(self.accounts) + 1}")
        return AuthSession(user=user, access_token=f"token-{user.id}")

    def sign_in(self, email: str, password: str) -> AuthSession:
        account = self.accounts.get(email)
        if account is None or account[0] != password:
            raise ValueError("Invalid login credentials")
        user = account[1]
        self.tokens[f"token-{user.id}"] = user
        return AuthSession(user=user, access_token=f"token-{user.id}")

    def sign_out(self) -> None:
        self.signed_out += 1

    def revoke(self, access_token: str) -> None:
        self.revoked.append(access_token)
        self.tokens.pop(access_token, None)

    def get_user(self, access_token: str) -> AuthUser | None:
        return self.tokens.get(access_token)

    def update_display_name(self, user_id: str, display_name: str) -> AuthUser:
        if self.rename_error is not None:
            raise self.rename_error
        for email, (password, user) in self.accounts.items():
            if user.id == user_id:
                renamed = AuthUser(
                    id=user.id, email=user.email, display_name=display_name
                )
                self.accounts[email] = (password, renamed)
                self.tokens[f"token-{user.id}"] = renamed
                return renamed
        raise ValueError("User not found")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service.key.signature",
        supabase_anon_key="anon.key.signature",
        openai_api_key="openai-key",
        environment="test",
    )


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def document_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def container(
    settings: Settings,
    completion_client: FakeCompletionClient,
    document_store: InMemoryDocumentStore,
    identity_provider: FakeIdentityProvider,
) -> AppContainer:
    identity_service = IdentityService(identity_provider)
    profile_service = ProfileService(document_store)
    analysis_service = FoodAnalysisService(
        client=completion_client, model=settings.openai_model
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        identity_service=identity_service,
        profile_service=profile_service,
        session_controller=SessionController(
            identity=identity_service,
            profiles=profile_service,
            dev_routes_enabled=settings.dev_routes_enabled,
        ),
        analysis_service=analysis_service,
        food_catalog_service=FoodCatalogService(),
        meal_service=MealService(analysis_service),
        close_resources=close_resources,
    )
