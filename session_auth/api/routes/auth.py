from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Request, Response, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from session_auth.api.error import raise_for_error
from session_auth.api.utils.cookies import clear_token_cookies, set_token_cookies
from session_auth.api.utils.request_meta import request_provenance
from session_auth.app.services.session_manager import SessionManager
from session_auth.app.use_cases.auth import MessageResponse, UserInfo
from session_auth.depends import current_user_id, get_session_manager
from session_auth.domain.errors import unauthorized

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before it reaches the use case.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class RefreshRequest(BaseModel):
    """Refresh token in the body, for clients that cannot use cookies"""

    refresh_token: Optional[str] = Field(None, description="Refresh token")


class LoginResponse(BaseModel):
    """Login/refresh payload; the refresh token only travels as a cookie"""

    user: UserInfo
    access_token: str


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=UserInfo)
async def signup(
    request: SignupRequest, manager: SessionManager = Depends(get_session_manager)
):
    """
    User Signup

    Raises:
        - 409 Conflict: Email already exists
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
    """
    result = await manager.signup(request.name, request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    http_request: Request,
    response: Response,
    manager: SessionManager = Depends(get_session_manager),
):
    """
    User Login

    Returns the access token in the body and sets the access_token and
    refresh_token cookies.

    Raises:
        - 401 Unauthorized: Invalid credentials
    """
    user_agent, ip_address = request_provenance(http_request)
    result = await manager.login(request.email, request.password, user_agent, ip_address)

    if result.is_err():
        raise_for_error(result.error)

    data = result.value
    set_token_cookies(response, ApplicationConfig, data.access_token, data.refresh_token)
    return LoginResponse(user=data.user, access_token=data.access_token)


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def refresh(
    http_request: Request,
    response: Response,
    request: Optional[RefreshRequest] = None,
    refresh_token: Optional[str] = Cookie(default=None),
    manager: SessionManager = Depends(get_session_manager),
):
    """
    Refresh Tokens

    Consumes the refresh token (body if given, else cookie) and rotates it.

    Raises:
        - 401 Unauthorized: Missing, invalid, revoked or expired token
    """
    token = (request.refresh_token if request else None) or refresh_token
    if not token:
        raise_for_error(unauthorized("Refresh token not provided"))

    user_agent, ip_address = request_provenance(http_request)
    result = await manager.refresh(token, user_agent, ip_address)

    if result.is_err():
        raise_for_error(result.error)

    data = result.value
    set_token_cookies(response, ApplicationConfig, data.access_token, data.refresh_token)
    return LoginResponse(user=data.user, access_token=data.access_token)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(
    response: Response,
    request: Optional[RefreshRequest] = None,
    refresh_token: Optional[str] = Cookie(default=None),
    user_id=Depends(current_user_id),
    manager: SessionManager = Depends(get_session_manager),
):
    """Revoke the current session and clear token cookies"""
    token = (request.refresh_token if request else None) or refresh_token
    result = await manager.logout(user_id, token)

    if result.is_err():
        raise_for_error(result.error)

    clear_token_cookies(response, ApplicationConfig)
    return result.value


@router.post("/logout-all", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout_all(
    response: Response,
    user_id=Depends(current_user_id),
    manager: SessionManager = Depends(get_session_manager),
):
    """Revoke every session of the current user and clear token cookies"""
    result = await manager.logout_all(user_id)

    if result.is_err():
        raise_for_error(result.error)

    clear_token_cookies(response, ApplicationConfig)
    return result.value
