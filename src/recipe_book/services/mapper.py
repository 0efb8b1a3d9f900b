"""Conversions between transport, domain and storage recipe shapes."""

from dataclasses import dataclass
from types import MappingProxyType

from recipe_book.domain.entities import RecipeEntity
from recipe_book.domain.errors import InvalidRecipeError
from recipe_book.domain.models import RecipeModel
from recipe_book.domain.recipes import Recipe


@dataclass(frozen=True)
class RecipeMapper:
    """Stateless translator between ``RecipeModel``, ``Recipe`` and ``RecipeEntity``.

    Identity generation is left to ``RecipeBuilder``: the mapper only ever
    forwards an existing key.
    """

    def map_model_to_domain(self, model: RecipeModel | None) -> Recipe:
        """Build a validated recipe from a client payload."""
        if model is None:
            raise InvalidRecipeError("Recipe model is missing")
        return (
            Recipe.builder(model.name, model.uploader, model.recipe_summary)
            .with_key(model.key)
            .with_tags(model.tags)
            .with_thumbs_up_count(model.thumbs_up_count)
            .with_thumbs_down_count(model.thumbs_down_count)
            .with_ingredients(model.ingredients)
            .with_method(model.method)
            .build()
        )

    def map_domain_to_entity(self, recipe: Recipe | None) -> RecipeEntity:
        """Copy a validated recipe into its storage shape."""
        if recipe is None:
            raise InvalidRecipeError("Recipe is missing")
        return RecipeEntity(
            key=recipe.key,
            name=recipe.name,
            uploader=recipe.uploader,
            recipe_summary=recipe.recipe_summary,
            tags=recipe.tags,
            thumbs_up_count=recipe.thumbs_up_count,
            thumbs_down_count=recipe.thumbs_down_count,
            ingredients=MappingProxyType(dict(recipe.ingredients)),
            method=MappingProxyType(dict(recipe.method)),
        )

    def map_domain_to_model(self, recipe: Recipe) -> RecipeModel:
        """Shape a recipe for clients."""
        return RecipeModel(
            key=recipe.key,
            name=recipe.name,
            uploader=recipe.uploader,
            recipe_summary=recipe.recipe_summary,
            thumbs_up_count=recipe.thumbs_up_count,
            thumbs_down_count=recipe.thumbs_down_count,
            tags=set(recipe.tags),
            ingredients=dict(recipe.ingredients),
            method=dict(recipe.method),
        )

    def map_entity_to_domain(self, entity: RecipeEntity) -> Recipe:
        """Rebuild a recipe from storage, keeping its stored key."""
        return (
            Recipe.builder(entity.name, entity.uploader, entity.recipe_summary)
            .with_key(entity.key)
            .with_tags(entity.tags)
            .with_thumbs_up_count(entity.thumbs_up_count)
            .with_thumbs_down_count(entity.thumbs_down_count)
            .with_ingredients(entity.ingredients)
            .with_method(entity.method)
            .build()
        )

    def map_entity_to_model(self, entity: RecipeEntity) -> RecipeModel:
        """Shape a stored recipe for clients."""
        return self.map_domain_to_model(self.map_entity_to_domain(entity))
