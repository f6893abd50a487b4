"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response.

    For validation errors ``details`` is a list of ``{"field", "message"}``
    objects, one per violated field.
    """

    error_code: str
    message: str
    details: Any | None = None


class MessageResponse(BaseModel):
    """Confirmation message for operations without a resource to return."""

    message: str


AUTH_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse, "description": "Missing or invalid token"},
}
