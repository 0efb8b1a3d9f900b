"""Storage-shaped recipe records."""

from collections.abc import Mapping
from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class RecipeEntity:
    """Represents a recipe row stored in the database."""

    key: UUID
    name: str
    uploader: str
    recipe_summary: str
    tags: frozenset[str]
    thumbs_up_count: int
    thumbs_down_count: int
    ingredients: Mapping[str, str]
    method: Mapping[int, str]
