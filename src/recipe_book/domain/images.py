"""Domain models for recipe images."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class ImageUpload:
    """Raw image payload uploaded with a recipe."""

    file_name: str | None
    content_type: str | None
    content: bytes


@dataclass(frozen=True)
class ImageModel:
    """Describes a stored image associated with a recipe."""

    key: UUID
    recipe_key: UUID
    file_name: str | None
    content_type: str | None
