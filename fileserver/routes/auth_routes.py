"""Authentication API routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, status
from fastapi.responses import PlainTextResponse

from common.constants import AUTH_TOKEN_HEADER
from fileserver.outcomes import OutcomeStatus
from fileserver.routes.common import error_response, get_auth_service
from fileserver.schemas.auth import LoginRequest, LoginResponse
from fileserver.services.auth_service import AuthService

router = APIRouter(tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """
    Authenticate a user and issue a session token.

    Parameters:
        - login: User's email
        - password: User's password

    Returns:
        - auth-token: Signed session token

    Raises:
        - 400: Bad credentials
        - 500: Internal server error
    """
    outcome = auth_service.authenticate(request.login, request.password)

    if outcome.ok:
        return LoginResponse(auth_token=outcome.value)
    if outcome.status is OutcomeStatus.REJECTED:
        return error_response(status.HTTP_400_BAD_REQUEST, "Bad credentials")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error login")


@router.post("/logout", response_class=PlainTextResponse)
def logout(
    auth_token: Optional[str] = Header(None, alias=AUTH_TOKEN_HEADER),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    End a session. Tokens are not revoked and remain valid until expiry.
    """
    auth_service.logout(auth_token)
    return "Success logout"
