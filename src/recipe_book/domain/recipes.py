"""Validated domain model for recipes."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from uuid import UUID, uuid4

from recipe_book.domain.errors import InvalidRecipeError


@dataclass(frozen=True)
class Recipe:
    """A validated recipe with a stable identity.

    Instances are only produced by ``RecipeBuilder.build``, which guarantees
    that ``name``, ``uploader`` and ``recipe_summary`` are not blank.
    """

    key: UUID
    name: str
    uploader: str
    recipe_summary: str
    tags: frozenset[str]
    thumbs_up_count: int
    thumbs_down_count: int
    ingredients: Mapping[str, str]
    method: Mapping[int, str]

    @staticmethod
    def builder(name: str, uploader: str, recipe_summary: str) -> "RecipeBuilder":
        """Start building a recipe from its required fields."""
        return RecipeBuilder(
            name=name, uploader=uploader, recipe_summary=recipe_summary
        )


@dataclass
class RecipeBuilder:
    """Accumulates recipe fields and validates them once in ``build``."""

    name: str | None
    uploader: str | None
    recipe_summary: str | None
    _key: UUID | None = field(default=None, init=False)
    _tags: Iterable[str] | None = field(default=None, init=False)
    _thumbs_up_count: int | None = field(default=None, init=False)
    _thumbs_down_count: int | None = field(default=None, init=False)
    _ingredients: Mapping[str, str] | None = field(default=None, init=False)
    _method: Mapping[int, str] | None = field(default=None, init=False)

    def with_key(self, key: UUID | None) -> "RecipeBuilder":
        """Reuse an existing identity instead of generating one."""
        self._key = key
        return self

    def with_tags(self, tags: Iterable[str] | None) -> "RecipeBuilder":
        self._tags = tags
        return self

    def with_thumbs_up_count(self, count: int | None) -> "RecipeBuilder":
        self._thumbs_up_count = count
        return self

    def with_thumbs_down_count(self, count: int | None) -> "RecipeBuilder":
        self._thumbs_down_count = count
        return self

    def with_ingredients(
        self, ingredients: Mapping[str, str] | None
    ) -> "RecipeBuilder":
        self._ingredients = ingredients
        return self

    def with_method(self, method: Mapping[int, str] | None) -> "RecipeBuilder":
        self._method = method
        return self

    def build(self) -> Recipe:
        """Validate required fields, apply defaults and return the recipe."""
        for field_name, value in (
            ("name", self.name),
            ("uploader", self.uploader),
            ("recipe_summary", self.recipe_summary),
        ):
            if value is None or not value.strip():
                raise InvalidRecipeError(
                    f"Recipe {field_name} must not be blank", field=field_name
                )
        method = self._method or {}
        return Recipe(
            key=self._key or uuid4(),
            name=self.name,
            uploader=self.uploader,
            recipe_summary=self.recipe_summary,
            tags=frozenset(self._tags or ()),
            thumbs_up_count=self._thumbs_up_count or 0,
            thumbs_down_count=self._thumbs_down_count or 0,
            ingredients=MappingProxyType(dict(self._ingredients or {})),
            method=MappingProxyType({step: method[step] for step in sorted(method)}),
        )
