"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from recipe_book.config import Settings
from recipe_book.containers import AppContainer
from recipe_book.domain.entities import RecipeEntity
from recipe_book.domain.errors import ImageNotFoundError
from recipe_book.domain.images import ImageModel, ImageUpload
from recipe_book.domain.models import RecipeModel
from recipe_book.services.recipes import (
    ImageRepository,
    RecipeRepository,
    RecipeService,
)


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: dict[UUID, RecipeEntity] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def insert_recipe(self, entity: RecipeEntity) -> RecipeEntity:
        self.calls.append("insert")
        if entity.key in self.recipes:
            raise KeyError(entity.key)
        self.recipes[entity.key] = entity
        return entity

    def upsert_recipe(self, entity: RecipeEntity) -> RecipeEntity:
        self.calls.append("upsert")
        self.recipes[entity.key] = entity
        return entity

    def delete_recipe(self, recipe_key: UUID) -> None:
        self.calls.append("delete")
        self.recipes.pop(recipe_key, None)

    def list_recipes(self) -> list[RecipeEntity]:
        return list(self.recipes.values())


@dataclass
class InMemoryImageRepository(ImageRepository):
    """In-memory image repository for tests."""

    descriptors: dict[UUID, ImageModel] = field(default_factory=dict)
    contents: dict[UUID, bytes] = field(default_factory=dict)
    fail_with: Exception | None = None

    def associate_images(self, recipe_key: UUID, images: list[ImageUpload]) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        for image in images:
            image_key = uuid4()
            self.descriptors[image_key] = ImageModel(
                key=image_key,
                recipe_key=recipe_key,
                file_name=image.file_name,
                content_type=image.content_type,
            )
            self.contents[image_key] = image.content

    def images_for_recipe(self, recipe_key: UUID) -> set[ImageModel]:
        return {
            image
            for image in self.descriptors.values()
            if image.recipe_key == recipe_key
        }

    def image_bytes(self, image_key: UUID) -> bytes:
        if image_key not in self.contents:
            raise ImageNotFoundError(image_key)
        return self.contents[image_key]


def make_recipe_model(**overrides: object) -> RecipeModel:
    """Return a valid recipe payload with optional field overrides."""
    fields: dict[str, object] = {
        "name": "Toast",
        "uploader": "Ana",
        "recipe_summary": "Simple toast",
        "tags": {"breakfast", "quick"},
        "thumbs_up_count": 3,
        "thumbs_down_count": 1,
        "ingredients": {"bread": "2 slices", "butter": "1 tbsp"},
        "method": {2: "Butter the toast.", 1: "Toast the bread."},
    }
    fields.update(overrides)
    return RecipeModel(**fields)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def image_repository() -> InMemoryImageRepository:
    return InMemoryImageRepository()


@pytest.fixture
def recipe_service(
    recipe_repository: InMemoryRecipeRepository,
    image_repository: InMemoryImageRepository,
) -> RecipeService:
    return RecipeService(
        recipe_repository=recipe_repository,
        image_repository=image_repository,
    )


@pytest.fixture
def container(settings: Settings, recipe_service: RecipeService) -> AppContainer:
    return AppContainer(settings=settings, recipe_service=recipe_service)
