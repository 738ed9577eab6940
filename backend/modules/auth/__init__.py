"""
Authentication module.

Handles account registration and login, session token issuance,
validation and rotation, and last-activity tracking.

Public API:
- IAuthService: Interface for auth operations
- CredentialCodec: Session token issue/validate/rotate
- SessionResult, TokenClaims, AuthResult: Data models
- Auth exceptions: MissingCredentialError, InvalidCredentialError, etc.
"""

from .interfaces import IAuthService, IUserRepository
from .models import (
    TokenClaims,
    SessionResult,
    UserRecord,
    RegisterRequest,
    LoginRequest,
    AuthResult,
)
from .tokens import CredentialCodec
from .exceptions import (
    MissingCredentialError,
    InvalidCredentialError,
    InvalidLoginError,
    EmailAlreadyRegisteredError,
    PasswordTooLongError,
    AccountNotFoundError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    # Codec
    "CredentialCodec",
    # Models
    "TokenClaims",
    "SessionResult",
    "UserRecord",
    "RegisterRequest",
    "LoginRequest",
    "AuthResult",
    # Exceptions
    "MissingCredentialError",
    "InvalidCredentialError",
    "InvalidLoginError",
    "EmailAlreadyRegisteredError",
    "PasswordTooLongError",
    "AccountNotFoundError",
]
