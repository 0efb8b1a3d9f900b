"""Recipe API endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import Response
from pydantic import ValidationError

from recipe_book.domain.images import ImageModel, ImageUpload
from recipe_book.domain.models import RecipeMediaCard, RecipeModel

if TYPE_CHECKING:
    from recipe_book.containers import AppContainer
    from recipe_book.services.recipes import RecipeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recipes"])


def _recipe_service(request: Request) -> RecipeService:
    container: AppContainer = request.app.state.container
    return container.recipe_service


@router.post("/recipes")
async def add_recipe(
    request: Request,
    recipe_model: str = Form(alias="recipeModel"),
    images: list[UploadFile] | None = File(default=None, alias="recipeCardImage"),
) -> RecipeModel:
    """Create a recipe from the form payload and its uploaded images."""
    media_card = await _read_media_card(recipe_model, images)
    logger.debug("Create recipe requested: images=%s", len(media_card.images))
    return _recipe_service(request).create_recipe(media_card)


@router.get("/recipes")
async def list_recipes(request: Request) -> list[RecipeModel]:
    """Return all recipes."""
    return _recipe_service(request).retrieve_all_recipes()


@router.put("/recipes/{recipe_key}")
async def edit_recipe(
    recipe_key: UUID,
    request: Request,
    recipe_model: str = Form(alias="recipeModel"),
    images: list[UploadFile] | None = File(default=None, alias="recipeCardImage"),
) -> RecipeModel:
    """Replace the recipe stored under ``recipe_key``."""
    media_card = await _read_media_card(recipe_model, images)
    logger.debug("Update recipe requested: key=%s", recipe_key)
    return _recipe_service(request).update_recipe(recipe_key, media_card)


@router.delete("/recipes/{recipe_key}")
async def delete_recipe(recipe_key: UUID, request: Request) -> list[RecipeModel]:
    """Delete a recipe and return the remaining recipes."""
    logger.debug("Delete recipe requested: key=%s", recipe_key)
    return _recipe_service(request).delete_recipe(recipe_key)


@router.get("/recipes/{recipe_key}/images")
async def list_recipe_images(recipe_key: UUID, request: Request) -> list[ImageModel]:
    """Return descriptors for the images attached to a recipe."""
    images = _recipe_service(request).retrieve_image_models(recipe_key)
    return sorted(images, key=lambda image: str(image.key))


@router.get("/images/{image_key}")
async def get_image(image_key: UUID, request: Request) -> Response:
    """Return raw image bytes."""
    content = _recipe_service(request).retrieve_image(image_key)
    return Response(content=content, media_type="image/jpeg")


async def _read_media_card(
    raw_model: str, uploads: list[UploadFile] | None
) -> RecipeMediaCard:
    """Parse the multipart recipe payload into a media card."""
    try:
        model = RecipeModel.model_validate_json(raw_model)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail="Malformed recipeModel payload",
        ) from exc
    images = [
        ImageUpload(
            file_name=upload.filename,
            content_type=upload.content_type,
            content=await upload.read(),
        )
        for upload in uploads or []
    ]
    return RecipeMediaCard(recipe_model=model, images=images)
