"""
Base exception classes for the Platewise backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class PlatewiseError(Exception):
    """
    Base exception for all Platewise errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(PlatewiseError):
    """A required secret or connection string is missing."""

    def __init__(self, setting: str, message: Optional[str] = None):
        super().__init__(
            message or f"Missing required configuration: {setting}",
            code="CONFIGURATION_ERROR",
            details={"setting": setting},
        )
        self.setting = setting


class NotFoundError(PlatewiseError):
    """Resource not found."""

    pass


class ValidationError(PlatewiseError):
    """Input validation failed."""

    pass


class ConflictError(PlatewiseError):
    """A unique key is already taken."""

    pass


class AuthenticationError(PlatewiseError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ExternalServiceError(PlatewiseError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
