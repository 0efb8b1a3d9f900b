"""Supabase implementation for recipe persistence."""

from dataclasses import dataclass
from types import MappingProxyType
from uuid import UUID

from supabase import Client

from recipe_book.domain.entities import RecipeEntity
from recipe_book.domain.errors import CollaboratorError
from recipe_book.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes."""

    client: Client

    def insert_recipe(self, entity: RecipeEntity) -> RecipeEntity:
        """Insert a recipe row and return it."""
        response = self.client.table("recipes").insert(_serialize(entity)).execute()
        if not response.data:
            raise CollaboratorError("insert_recipe", "no row returned")
        return _parse_recipe(response.data[0])

    def upsert_recipe(self, entity: RecipeEntity) -> RecipeEntity:
        """Insert or replace the recipe row with the entity's key."""
        response = (
            self.client.table("recipes")
            .upsert(_serialize(entity), on_conflict="key")
            .execute()
        )
        if not response.data:
            raise CollaboratorError("upsert_recipe", "no row returned")
        return _parse_recipe(response.data[0])

    def delete_recipe(self, recipe_key: UUID) -> None:
        """Delete a recipe row."""
        self.client.table("recipes").delete().eq("key", str(recipe_key)).execute()

    def list_recipes(self) -> list[RecipeEntity]:
        """Return every stored recipe."""
        response = self.client.table("recipes").select("*").execute()
        return [_parse_recipe(row) for row in response.data or []]


def _serialize(entity: RecipeEntity) -> dict[str, object]:
    """Convert an entity into a row payload. JSON object keys must be strings."""
    return {
        "key": str(entity.key),
        "name": entity.name,
        "uploader": entity.uploader,
        "recipe_summary": entity.recipe_summary,
        "tags": sorted(entity.tags),
        "thumbs_up_count": entity.thumbs_up_count,
        "thumbs_down_count": entity.thumbs_down_count,
        "ingredients": dict(entity.ingredients),
        "method": {str(step): text for step, text in entity.method.items()},
    }


def _parse_recipe(row: dict[str, object]) -> RecipeEntity:
    """Parse a recipe row into an entity."""
    method_raw = row.get("method") or {}
    method = {int(step): str(text) for step, text in method_raw.items()}
    return RecipeEntity(
        key=UUID(str(row["key"])),
        name=str(row.get("name") or ""),
        uploader=str(row.get("uploader") or ""),
        recipe_summary=str(row.get("recipe_summary") or ""),
        tags=frozenset(row.get("tags") or ()),
        thumbs_up_count=int(row.get("thumbs_up_count") or 0),
        thumbs_down_count=int(row.get("thumbs_down_count") or 0),
        ingredients=MappingProxyType(dict(row.get("ingredients") or {})),
        method=MappingProxyType({step: method[step] for step in sorted(method)}),
    )
