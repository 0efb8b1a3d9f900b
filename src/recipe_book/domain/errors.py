"""Error types raised by the recipe book core."""

from uuid import UUID


class RecipeBookError(Exception):
    """Base class for recipe book errors."""


class InvalidRecipeError(RecipeBookError):
    """Raised when a recipe cannot be built from the supplied data."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(RecipeBookError):
    """Raised when a lookup requires an identity that does not exist."""


class ImageNotFoundError(NotFoundError):
    """Raised when an image key is unknown to the image store."""

    def __init__(self, image_key: UUID) -> None:
        super().__init__(f"Image not found: {image_key}")
        self.image_key = image_key


class CollaboratorError(RecipeBookError):
    """Raised when a storage or image backend fails to complete an operation."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"{operation} failed: {reason}")
        self.operation = operation
        self.reason = reason
