"""Tests for recipe API endpoints."""

import json
from uuid import uuid4

from fastapi.testclient import TestClient

from recipe_book.api.app import create_app
from recipe_book.domain.errors import CollaboratorError
from tests.conftest import InMemoryImageRepository, InMemoryRecipeRepository

_TOAST = {"name": "Toast", "uploader": "Ana", "recipeSummary": "Simple toast"}


def _create(  # type: ignore[no-untyped-def]
    client: TestClient, payload: dict[str, object], files=None
):
    return client.post(
        "/api/recipes",
        data={"recipeModel": json.dumps(payload)},
        files=files,
    )


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_recipe_endpoint(
    container, recipe_repository: InMemoryRecipeRepository
) -> None:
    client = TestClient(create_app(container))

    response = _create(client, {**_TOAST, "method": {"1": "Toast the bread."}})

    assert response.status_code == 200
    data = response.json()
    assert data["key"]
    assert data["name"] == "Toast"
    assert data["thumbsUpCount"] == 0
    assert data["method"] == {"1": "Toast the bread."}
    assert len(recipe_repository.recipes) == 1


def test_create_recipe_with_images(
    container, image_repository: InMemoryImageRepository
) -> None:
    client = TestClient(create_app(container))

    response = _create(
        client,
        _TOAST,
        files=[
            ("recipeCardImage", ("a.jpg", b"first", "image/jpeg")),
            ("recipeCardImage", ("b.jpg", b"second", "image/jpeg")),
        ],
    )
    key = response.json()["key"]
    images = client.get(f"/api/recipes/{key}/images").json()
    image_response = client.get(f"/api/images/{images[0]['key']}")

    assert response.status_code == 200
    assert {image["file_name"] for image in images} == {"a.jpg", "b.jpg"}
    assert image_response.status_code == 200
    assert image_response.headers["content-type"] == "image/jpeg"
    assert image_response.content in {b"first", b"second"}


def test_create_blank_recipe_is_rejected(
    container, recipe_repository: InMemoryRecipeRepository
) -> None:
    client = TestClient(create_app(container))

    response = _create(client, {**_TOAST, "name": "   "})

    assert response.status_code == 422
    assert response.json()["field"] == "name"
    assert client.get("/api/recipes").json() == []


def test_create_malformed_payload_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/recipes", data={"recipeModel": "{not json"})

    assert response.status_code == 422


def test_update_and_delete_endpoints(container) -> None:
    client = TestClient(create_app(container))
    first = _create(client, _TOAST).json()
    second = _create(client, {**_TOAST, "name": "Dal"}).json()

    updated = client.put(
        f"/api/recipes/{first['key']}",
        data={"recipeModel": json.dumps({**_TOAST, "name": "Updated"})},
    )
    remaining = client.delete(f"/api/recipes/{second['key']}")

    assert updated.status_code == 200
    assert updated.json()["key"] == first["key"]
    assert updated.json()["name"] == "Updated"
    assert remaining.status_code == 200
    assert [recipe["key"] for recipe in remaining.json()] == [first["key"]]


def test_delete_unknown_recipe_returns_full_list(container) -> None:
    client = TestClient(create_app(container))
    created = _create(client, _TOAST).json()

    response = client.delete(f"/api/recipes/{uuid4()}")

    assert response.status_code == 200
    assert response.json() == [created]


def test_unknown_image_returns_404(container) -> None:
    client = TestClient(create_app(container))

    response = client.get(f"/api/images/{uuid4()}")

    assert response.status_code == 404


def test_image_failure_returns_502(
    container, image_repository: InMemoryImageRepository
) -> None:
    image_repository.fail_with = CollaboratorError("associate_images", "bucket down")
    client = TestClient(create_app(container))

    response = _create(
        client, _TOAST, files=[("recipeCardImage", ("a.jpg", b"a", "image/jpeg"))]
    )

    assert response.status_code == 502
