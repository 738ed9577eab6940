"""
Session guard.

Validates bearer session tokens on every authenticated request, hands
out a rotated token when the current one is close to expiry, and
dispatches the throttled last-activity update without waiting for it.
"""

from fastapi import Depends, Request, Response
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional

from modules.auth.exceptions import MissingCredentialError
from modules.auth.interfaces import IAuthService
from shared.background import BackgroundDispatcher
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service, get_background_dispatcher

# Response header carrying a rotated session token
ROTATED_TOKEN_HEADER = "X-New-Token"

# Bearer token extractor; returns None for a missing header or another scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    response: Response,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
    background: BackgroundDispatcher = Depends(get_background_dispatcher),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingCredentialError()

    session = await auth.authenticate(credentials.credentials)
    request.state.user = session.user

    if session.rotated_token:
        response.headers[ROTATED_TOKEN_HEADER] = session.rotated_token

    background.dispatch(
        auth.record_activity(session.user.id),
        name=f"record-activity:{session.user.id}",
    )
    return session.user


# Type alias for cleaner route definitions
RequireAuth = Depends(get_current_user)
