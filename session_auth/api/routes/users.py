from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from session_auth.api.error import raise_for_error
from session_auth.app.services.password_hasher import IPasswordHasher
from session_auth.app.services.unit_of_work import UnitOfWork
from session_auth.app.use_cases.auth import MessageResponse
from session_auth.app.use_cases.users import (
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UserPage,
    UserProfile,
)
from session_auth.depends import (
    current_user_id,
    get_password_hasher,
    get_unit_of_work,
    require_admin,
)
from session_auth.domain.entities import UserRole

router = APIRouter(prefix="/users", tags=["Users"])


class UpdateProfileRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)


class UpdateUserRequest(UpdateProfileRequest):
    role: Optional[UserRole] = None


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def get_profile(
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUserUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/me", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def update_profile(
    request: UpdateProfileRequest,
    user_id: UUID = Depends(current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Update Own Profile

    Raises:
        - 409 Conflict: Email already in use
    """
    command = UpdateProfileCommand(**request.model_dump())
    result = await UpdateProfileUseCase(uow, hasher).execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=UserPage,
    dependencies=[Depends(require_admin)],
)
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List Users (admin)"""
    result = await ListUsersUseCase(uow).execute(page, limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=UserProfile,
    dependencies=[Depends(require_admin)],
)
async def get_user(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get User (admin)

    Raises:
        - 404 Not Found: User not found
    """
    result = await GetUserUseCase(uow).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    admin: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
):
    """
    Update User (admin)

    Raises:
        - 403 Forbidden: Admin demoting themselves
        - 404 Not Found: User not found
        - 409 Conflict: Email already in use
    """
    command = UpdateUserCommand(**request.model_dump())
    result = await UpdateUserUseCase(uow, hasher).execute(
        UUID(admin["sub"]), user_id, command
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{user_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_user(
    user_id: UUID,
    admin: dict = Depends(require_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete User (admin)

    Removes the user and all of their sessions.

    Raises:
        - 403 Forbidden: Admin deleting themselves
        - 404 Not Found: User not found
    """
    result = await DeleteUserUseCase(uow).execute(UUID(admin["sub"]), user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
