"""Random recipe generation and seeding for manual testing."""

import argparse
import asyncio
import logging
import random
from dataclasses import dataclass
from pathlib import Path

import httpx

from recipe_book.app_logging import configure_logging
from recipe_book.domain.images import ImageUpload
from recipe_book.domain.models import RecipeModel

_logger = logging.getLogger(__name__)

_DISHES = (
    "Toast",
    "Pancakes",
    "Risotto",
    "Shakshuka",
    "Ramen",
    "Lasagne",
    "Dal",
    "Paella",
    "Tacos",
    "Goulash",
)
_UPLOADERS = ("Ana", "Ben", "Chidi", "Dana", "Eli", "Farah")
_TAGS = ("vegan", "quick", "spicy", "breakfast", "dessert", "family", "budget")
_INGREDIENTS = (
    "flour",
    "butter",
    "egg",
    "milk",
    "rice",
    "onion",
    "garlic",
    "tomato",
    "chickpeas",
    "olive oil",
    "salt",
    "pepper",
)
_UNITS = ("g", "ml", "tbsp", "tsp", "cups")
_VERBS = ("Chop", "Stir", "Whisk", "Simmer", "Bake", "Fold", "Season", "Rest")

MAX_INGREDIENTS = 8
MAX_METHOD_STEPS = 6


def generate_recipe_model(
    rng: random.Random,
    max_ingredients: int = MAX_INGREDIENTS,
    max_method_steps: int = MAX_METHOD_STEPS,
) -> RecipeModel:
    """Build a random, valid recipe payload without a key."""
    dish = rng.choice(_DISHES)
    ingredient_names = rng.sample(
        _INGREDIENTS, rng.randint(0, min(max_ingredients, len(_INGREDIENTS)))
    )
    return RecipeModel(
        name=f"{rng.choice(('Easy', 'Classic', 'Weeknight', 'Grandma'))} {dish}",
        uploader=rng.choice(_UPLOADERS),
        recipe_summary=f"A {rng.choice(_TAGS)} take on {dish.lower()}.",
        thumbs_up_count=rng.randint(0, 500),
        thumbs_down_count=rng.randint(0, 50),
        tags=set(rng.sample(_TAGS, rng.randint(0, 3))),
        ingredients={
            name: f"{rng.randint(1, 500)} {rng.choice(_UNITS)}"
            for name in ingredient_names
        },
        method={
            step: f"{rng.choice(_VERBS)} for {rng.randint(1, 30)} minutes."
            for step in range(1, rng.randint(0, max_method_steps) + 1)
        },
    )


def generate_recipe_models(
    count: int,
    max_ingredients: int = MAX_INGREDIENTS,
    max_method_steps: int = MAX_METHOD_STEPS,
    seed: int | None = None,
) -> list[RecipeModel]:
    """Build ``count`` random recipe payloads from a generator local to this call."""
    rng = random.Random(seed)
    return [
        generate_recipe_model(rng, max_ingredients, max_method_steps)
        for _ in range(count)
    ]


@dataclass
class HttpxRecipeSeeder:
    """Posts recipes to a running recipe book API."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxRecipeSeeder":
        """Create a seeder with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def create_recipe(
        self, model: RecipeModel, images: list[ImageUpload] | None = None
    ) -> RecipeModel:
        """Create one recipe through the multipart create endpoint."""
        files = [
            (
                "recipeCardImage",
                (
                    image.file_name or "image.jpg",
                    image.content,
                    image.content_type or "image/jpeg",
                ),
            )
            for image in images or []
        ]
        response = await self.http_client.post(
            f"{self.base_url}/api/recipes",
            data={"recipeModel": model.model_dump_json(by_alias=True)},
            files=files or None,
            timeout=20,
        )
        response.raise_for_status()
        return RecipeModel.model_validate(response.json())

    async def seed(
        self, models: list[RecipeModel], images: list[ImageUpload] | None = None
    ) -> list[RecipeModel]:
        """Create every recipe in order and return the created payloads."""
        created = []
        for model in models:
            result = await self.create_recipe(model, images)
            _logger.info("Seeded recipe: key=%s name=%s", result.key, result.name)
            created.append(result)
        return created

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()


def load_images(paths: list[Path]) -> list[ImageUpload]:
    """Read image files to attach to every seeded recipe."""
    return [
        ImageUpload(
            file_name=path.name,
            content_type="image/jpeg",
            content=path.read_bytes(),
        )
        for path in paths
    ]


async def _run(args: argparse.Namespace) -> None:
    seeder = HttpxRecipeSeeder.create(args.base_url)
    try:
        models = generate_recipe_models(args.count, seed=args.seed)
        await seeder.seed(models, load_images(args.image))
    finally:
        await seeder.close()


def main(argv: list[str] | None = None) -> None:
    """Seed a running recipe book API with random recipes."""
    parser = argparse.ArgumentParser(description=main.__doc__)
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--count", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--image", type=Path, action="append", default=[])
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)
    configure_logging(args.log_level.upper())
    asyncio.run(_run(args))


if __name__ == "__main__":
    main()
