"""
Error response models.

Standardized error responses for the API.
"""

from pydantic import BaseModel
from typing import Any, Optional


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: Optional[str] = None
    details: Optional[dict[str, Any]] = None


class SuccessResponse(BaseModel):
    """Bare success envelope for endpoints without a payload."""

    success: bool = True
