from uuid import UUID

from fastapi import APIRouter, Depends, status

from session_auth.api.error import raise_for_error
from session_auth.app.services.session_manager import SessionManager
from session_auth.app.use_cases.auth import MessageResponse, SessionList
from session_auth.depends import current_user_id, get_session_manager

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.get("", status_code=status.HTTP_200_OK, response_model=SessionList)
async def list_sessions(
    user_id: UUID = Depends(current_user_id),
    manager: SessionManager = Depends(get_session_manager),
):
    """
    List Active Sessions

    Unrevoked, unexpired sessions of the current user, newest first.
    """
    result = await manager.list_sessions(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
)
async def revoke_session(
    session_id: UUID,
    user_id: UUID = Depends(current_user_id),
    manager: SessionManager = Depends(get_session_manager),
):
    """
    Revoke Specific Session

    Logs out one device of the current user.

    Raises:
        - 401 Unauthorized: Session not found or not owned by the caller
    """
    result = await manager.revoke_session(user_id, session_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
