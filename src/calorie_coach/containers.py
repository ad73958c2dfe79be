"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_coach.adapters.openai_completion_client import OpenAICompletionClient
from calorie_coach.adapters.supabase_document_store import SupabaseDocumentStore
from calorie_coach.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from calorie_coach.config import Settings
from calorie_coach.services.analysis import FoodAnalysisService
from calorie_coach.services.foods import FoodCatalogService
from calorie_coach.services.identity import IdentityService
from calorie_coach.services.meals import MealService
from calorie_coach.services.profiles import ProfileService
from calorie_coach.services.session import SessionController


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_service: IdentityService
    profile_service: ProfileService
    session_controller: SessionController
    analysis_service: FoodAnalysisService
    food_catalog_service: FoodCatalogService
    meal_service: MealService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_anon_key
    )
    identity_service = IdentityService(
        SupabaseIdentityProvider(client=auth_client, admin_client=supabase_client)
    )
    profile_service = ProfileService(
        SupabaseDocumentStore(
            client=supabase_client,
            collection=resolved_settings.profiles_collection,
        )
    )
    session_controller = SessionController(
        identity=identity_service,
        profiles=profile_service,
        dev_routes_enabled=resolved_settings.dev_routes_enabled,
    )
    completion_client = OpenAICompletionClient.create(
        resolved_settings.openai_api_key, store=resolved_settings.openai_store
    )
    analysis_service = FoodAnalysisService(
        client=completion_client,
        model=resolved_settings.openai_model,
    )
    meal_service = MealService(analysis_service)

    async def close_resources() -> None:
        session_controller.stop()
        await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_service=identity_service,
        profile_service=profile_service,
        session_controller=session_controller,
        analysis_service=analysis_service,
        food_catalog_service=FoodCatalogService(),
        meal_service=meal_service,
        close_resources=close_resources,
    )
