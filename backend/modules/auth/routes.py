"""
Account API endpoints.

Registration and login issue session tokens; /me returns the stored
account behind the current token.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import AccountSummary, AuthResult, LoginRequest, RegisterRequest

router = APIRouter()


@router.post("/register", response_model=AuthResult, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """
    Create an account and return its first session token.

    Returns 409 if the email is already registered.
    """
    return await service.register(request.email, request.password)


@router.post("/login", response_model=AuthResult)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """
    Exchange email and password for a session token.

    Unknown emails and wrong passwords both return the same 401.
    """
    return await service.login(request.email, request.password)


@router.get("/me", response_model=AccountSummary)
async def me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> AccountSummary:
    """
    Return the account of the current session.

    Returns 404 if the account was deleted after the token was issued.
    """
    return await service.get_account(user.id)
