"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.models import AuthenticatedUser

MAX_PASSWORD_BYTES = 72


class TokenClaims(BaseModel):
    """Decoded session token claims."""

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")


class SessionResult(BaseModel):
    """
    Outcome of authenticating a request.

    The rotated token is an auxiliary output kept apart from the identity,
    so a failed rotation can never turn into a failed authentication.
    """

    user: AuthenticatedUser
    rotated_token: Optional[str] = None


class UserRecord(BaseModel):
    """A row of the users table."""

    id: str
    email: EmailStr
    password_hash: str
    created_at: datetime
    last_login: Optional[datetime] = None
    last_active: Optional[datetime] = None


class RegisterRequest(BaseModel):
    """Body of the register endpoint."""

    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        # bcrypt rejects more than 72 bytes, and max_length counts characters
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded")
        return value


class LoginRequest(BaseModel):
    """Body of the login endpoint."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AccountSummary(BaseModel):
    id: str
    email: EmailStr


class AuthResult(BaseModel):
    """Response of a successful register or login."""

    success: bool = True
    token: str
    user: AccountSummary
