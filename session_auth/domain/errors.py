"""
Domain Error Vocabulary

Every failure a use case reports carries one of these codes. The message is
user-safe and stable; the HTTP layer maps the code to a status.
"""

from session_auth.libs.result import Error

UNAUTHORIZED = "UNAUTHORIZED"
FORBIDDEN = "FORBIDDEN"
NOT_FOUND = "NOT_FOUND"
CONFLICT = "CONFLICT"


def unauthorized(message: str) -> Error:
    return Error(UNAUTHORIZED, message)


def forbidden(message: str) -> Error:
    return Error(FORBIDDEN, message)


def not_found(message: str) -> Error:
    return Error(NOT_FOUND, message)


def conflict(message: str) -> Error:
    return Error(CONFLICT, message)


class DuplicateEmailError(Exception):
    """Raised by user stores when a write would duplicate an email"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Duplicate email: {email}")
