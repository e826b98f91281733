"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """Validated signup intent, created by the API layer"""

    name: str
    email: str
    password: str


class LoginCommand(BaseModel):
    """Credentials plus the request provenance stamped on the new session"""

    email: str
    password: str
    user_agent: str = "unknown"
    ip_address: str = "unknown"


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public user profile - never includes the password hash"""

    id: str
    name: str
    email: str
    role: str


class AuthResponse(BaseModel):
    """
    Response for login and refresh use cases.

    refresh_token is the raw credential; it is handed to the transport once
    and never readable again afterwards.
    """

    user: UserInfo
    access_token: str
    refresh_token: str
    session_id: str


class SessionInfo(BaseModel):
    """Active session as shown to its owner"""

    id: str
    user_agent: str
    ip_address: str
    created_at: datetime
    expires_at: datetime


class SessionList(BaseModel):
    sessions: List[SessionInfo]


class MessageResponse(BaseModel):
    message: str
