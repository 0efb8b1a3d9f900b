"""Supabase-backed recipe image storage."""

import logging
from dataclasses import dataclass
from uuid import UUID, uuid4

from supabase import Client

from recipe_book.domain.errors import CollaboratorError, ImageNotFoundError
from recipe_book.domain.images import ImageModel, ImageUpload
from recipe_book.services.recipes import ImageRepository

_DEFAULT_CONTENT_TYPE = "image/jpeg"

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseImageRepository(ImageRepository):
    """Stores image bytes in a Storage bucket and descriptors in a table."""

    client: Client
    bucket: str

    def associate_images(self, recipe_key: UUID, images: list[ImageUpload]) -> None:
        """Upload images and record their descriptors.

        Objects already uploaded are removed again if a later upload or the
        descriptor insert fails, so the bucket holds no unreferenced images.
        """
        if not images:
            return
        rows = []
        bucket = self.client.storage.from_(self.bucket)
        try:
            for image in images:
                image_key = uuid4()
                object_path = f"{recipe_key}/{image_key}"
                content_type = image.content_type or _DEFAULT_CONTENT_TYPE
                bucket.upload(
                    object_path, image.content, {"content-type": content_type}
                )
                rows.append(
                    {
                        "key": str(image_key),
                        "recipe_key": str(recipe_key),
                        "file_name": image.file_name,
                        "content_type": content_type,
                        "object_path": object_path,
                    }
                )
            response = self.client.table("recipe_images").insert(rows).execute()
            if not response.data:
                raise CollaboratorError("associate_images", "no rows returned")
        except Exception:
            if rows:
                _logger.warning(
                    "Removing %s orphaned images for recipe %s", len(rows), recipe_key
                )
                bucket.remove([row["object_path"] for row in rows])
            raise

    def images_for_recipe(self, recipe_key: UUID) -> set[ImageModel]:
        """Return descriptors for the images linked to a recipe."""
        response = (
            self.client.table("recipe_images")
            .select("key, recipe_key, file_name, content_type")
            .eq("recipe_key", str(recipe_key))
            .execute()
        )
        return {_parse_image(row) for row in response.data or []}

    def image_bytes(self, image_key: UUID) -> bytes:
        """Download the bytes for an image key."""
        response = (
            self.client.table("recipe_images")
            .select("object_path")
            .eq("key", str(image_key))
            .limit(1)
            .execute()
        )
        if not response.data:
            raise ImageNotFoundError(image_key)
        object_path = str(response.data[0]["object_path"])
        return self.client.storage.from_(self.bucket).download(object_path)


def _parse_image(row: dict[str, object]) -> ImageModel:
    """Parse an image row into a descriptor."""
    return ImageModel(
        key=UUID(str(row["key"])),
        recipe_key=UUID(str(row["recipe_key"])),
        file_name=row.get("file_name"),
        content_type=row.get("content_type"),
    )
