"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from recipe_book.api.recipes import router as recipes_router
from recipe_book.app_logging import configure_logging
from recipe_book.config import Settings
from recipe_book.containers import AppContainer, build_container
from recipe_book.domain.errors import (
    CollaboratorError,
    InvalidRecipeError,
    NotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level.upper())
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Recipe Book")
    app.state.container = container

    app.include_router(recipes_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(InvalidRecipeError)
    async def invalid_recipe(
        request: Request, exc: InvalidRecipeError
    ) -> JSONResponse:
        logger.warning("Rejected recipe: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "field": exc.field},
        )

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning("Lookup failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(CollaboratorError)
    async def collaborator_failed(
        request: Request, exc: CollaboratorError
    ) -> JSONResponse:
        logger.error("Backend failure during %s: %s", exc.operation, exc.reason)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)}
        )

    return app


def create_default_app(settings: Settings | None = None) -> FastAPI:
    """Create the app wired to Supabase, for ``uvicorn --factory``."""
    return create_app(build_container(settings))
