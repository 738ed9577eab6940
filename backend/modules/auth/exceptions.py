"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError


class MissingCredentialError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Missing or invalid authorization header"):
        super().__init__(message, code="MISSING_CREDENTIAL")


class InvalidCredentialError(AuthenticationError):
    """Raised when a session token is malformed, tampered with, or expired."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_CREDENTIAL")


class InvalidLoginError(AuthenticationError):
    """Raised when an email/password pair does not match an account."""

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_LOGIN")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class PasswordTooLongError(ValidationError):
    """Raised when a password exceeds what bcrypt can hash."""

    def __init__(self, max_bytes: int):
        super().__init__(
            f"Password must be at most {max_bytes} bytes when UTF-8 encoded",
            code="PASSWORD_TOO_LONG",
            details={"max_bytes": max_bytes},
        )


class AccountNotFoundError(NotFoundError):
    """Raised when a valid token names an account that no longer exists."""

    def __init__(self, user_id: str):
        super().__init__(
            "Account not found",
            code="ACCOUNT_NOT_FOUND",
            details={"user_id": user_id},
        )
