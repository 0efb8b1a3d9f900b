"""Recipe workflows composed from translation and storage calls."""

import logging
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from recipe_book.domain.entities import RecipeEntity
from recipe_book.domain.errors import InvalidRecipeError
from recipe_book.domain.images import ImageModel, ImageUpload
from recipe_book.domain.models import RecipeMediaCard, RecipeModel
from recipe_book.services.mapper import RecipeMapper

_logger = logging.getLogger(__name__)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def insert_recipe(self, entity: RecipeEntity) -> RecipeEntity:
        """Insert a new recipe row and return it."""

    def upsert_recipe(self, entity: RecipeEntity) -> RecipeEntity:
        """Insert or replace the recipe row with the entity's key."""

    def delete_recipe(self, recipe_key: UUID) -> None:
        """Delete a recipe row; unknown keys are ignored."""

    def list_recipes(self) -> list[RecipeEntity]:
        """Return every stored recipe."""


class ImageRepository(Protocol):
    """Storage interface for recipe images."""

    def associate_images(self, recipe_key: UUID, images: list[ImageUpload]) -> None:
        """Store images and link them to a recipe."""

    def images_for_recipe(self, recipe_key: UUID) -> set[ImageModel]:
        """Return descriptors for the images linked to a recipe."""

    def image_bytes(self, image_key: UUID) -> bytes:
        """Return raw image bytes, raising ImageNotFoundError if unknown."""


@dataclass
class RecipeService:
    """Application service for recipe create, read, update and delete."""

    recipe_repository: RecipeRepository
    image_repository: ImageRepository
    mapper: RecipeMapper = field(default_factory=RecipeMapper)

    def create_recipe(self, media_card: RecipeMediaCard | None) -> RecipeModel:
        """Validate and persist a new recipe, then attach any uploaded images."""
        if media_card is None:
            raise InvalidRecipeError("Recipe media card is missing")
        recipe = self.mapper.map_model_to_domain(media_card.recipe_model)
        stored = self.recipe_repository.insert_recipe(
            self.mapper.map_domain_to_entity(recipe)
        )
        created = self.mapper.map_entity_to_model(stored)
        _logger.info("Recipe created: key=%s name=%s", stored.key, stored.name)
        self._attach_images(stored.key, media_card.images)
        return created

    def retrieve_all_recipes(self) -> list[RecipeModel]:
        """Return every recipe in storage order."""
        return [
            self.mapper.map_entity_to_model(entity)
            for entity in self.recipe_repository.list_recipes()
        ]

    def delete_recipe(self, recipe_key: UUID) -> list[RecipeModel]:
        """Delete a recipe and return the remaining recipes."""
        self.recipe_repository.delete_recipe(recipe_key)
        _logger.info("Recipe deleted: key=%s", recipe_key)
        return self.retrieve_all_recipes()

    def update_recipe(
        self, recipe_key: UUID, media_card: RecipeMediaCard | None
    ) -> RecipeModel:
        """Replace the recipe stored under ``recipe_key`` with the supplied one."""
        if media_card is None or media_card.recipe_model is None:
            raise InvalidRecipeError("Recipe media card is missing")
        model = media_card.recipe_model.model_copy(update={"key": recipe_key})
        recipe = self.mapper.map_model_to_domain(model)
        stored = self.recipe_repository.upsert_recipe(
            self.mapper.map_domain_to_entity(recipe)
        )
        updated = self.mapper.map_entity_to_model(stored)
        _logger.info("Recipe updated: key=%s", stored.key)
        self._attach_images(stored.key, media_card.images)
        return updated

    def retrieve_image_models(self, recipe_key: UUID) -> set[ImageModel]:
        """Return descriptors for the images of a recipe."""
        return self.image_repository.images_for_recipe(recipe_key)

    def retrieve_image(self, image_key: UUID) -> bytes:
        """Return the raw bytes of a stored image."""
        return self.image_repository.image_bytes(image_key)

    def _attach_images(self, recipe_key: UUID, images: list[ImageUpload]) -> None:
        if not images:
            return
        self.image_repository.associate_images(recipe_key, images)
        _logger.info("Recipe images stored: key=%s count=%s", recipe_key, len(images))
