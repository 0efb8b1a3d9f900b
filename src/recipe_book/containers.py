"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from recipe_book.adapters.supabase_image_repository import SupabaseImageRepository
from recipe_book.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from recipe_book.config import Settings
from recipe_book.services.recipes import RecipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_service: RecipeService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    recipe_service = RecipeService(
        recipe_repository=SupabaseRecipeRepository(supabase_client),
        image_repository=SupabaseImageRepository(
            client=supabase_client,
            bucket=resolved_settings.recipe_image_bucket,
        ),
    )
    return AppContainer(settings=resolved_settings, recipe_service=recipe_service)
