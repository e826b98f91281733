from fastapi import status

from session_auth.domain.errors import CONFLICT, FORBIDDEN, NOT_FOUND, UNAUTHORIZED
from session_auth.libs.result import Error

STATUS_BY_CODE = {
    UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    FORBIDDEN: status.HTTP_403_FORBIDDEN,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CONFLICT: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the HTTP exception matching a use case Error code."""
    status_code = STATUS_BY_CODE.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
