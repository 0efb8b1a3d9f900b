"""Transport models exchanged with API clients."""

from dataclasses import dataclass, field
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from recipe_book.domain.images import ImageUpload


class RecipeModel(BaseModel):
    """Recipe payload as sent and received by clients.

    Every field is optional: validation happens when the payload is turned
    into a domain ``Recipe``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    key: UUID | None = None
    name: str | None = None
    uploader: str | None = None
    recipe_summary: str | None = None
    thumbs_up_count: int | None = None
    thumbs_down_count: int | None = None
    tags: set[str] | None = None
    ingredients: dict[str, str] | None = None
    method: dict[int, str] | None = None


@dataclass
class RecipeMediaCard:
    """A recipe payload bundled with the images uploaded alongside it."""

    recipe_model: RecipeModel | None
    images: list[ImageUpload] = field(default_factory=list)
