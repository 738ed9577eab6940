"""
Suggestion module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class SuggestionUnavailableError(ExternalServiceError):
    """Raised when the suggestion model fails or returns unusable output."""

    def __init__(self, message: str = "Failed to generate meal suggestions", original_error: Optional[str] = None):
        super().__init__(
            message,
            service="suggestions",
            code="SUGGESTION_UNAVAILABLE",
            details={"original_error": original_error} if original_error else None,
        )
