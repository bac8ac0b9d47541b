"""User management router (CRUD). Every endpoint requires a bearer token."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from userhub.application.queries.user.list_users_query import DEFAULT_PER_PAGE
from userhub.presentation.api.dependencies import (
    CreateUserCommandDep,
    DBSession,
    DeleteUserCommandDep,
    GetUserQueryDep,
    ListUsersQueryDep,
    UpdateUserCommandDep,
    get_current_user,
)
from userhub.presentation.api.schemas import (
    ApiResponse,
    CreateUserRequest,
    ErrorResponse,
    MessageResponse,
    PaginationMeta,
    UpdateUserRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])

UserIdPath = Annotated[int, Path(ge=1, description="User id")]

UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Not authenticated"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
VALIDATION = {422: {"model": ErrorResponse, "description": "Validation failed"}}


@router.get(
    "",
    summary="List users page by page",
    response_model_exclude_unset=True,
    responses={**UNAUTHORIZED, **VALIDATION},
)
async def list_users(
    query: ListUsersQueryDep,
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1)] = DEFAULT_PER_PAGE,
) -> ApiResponse[list[UserResponse]]:
    users = await query.execute(page=page, per_page=per_page)
    return ApiResponse[list[UserResponse]].ok(
        data=[UserResponse.from_domain(user) for user in users],
        meta=PaginationMeta(page=page, per_page=per_page).model_dump(),
    )


@router.post(
    "",
    summary="Create a user",
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_unset=True,
    responses={
        **UNAUTHORIZED,
        409: {"model": ErrorResponse, "description": "Email already registered"},
        **VALIDATION,
    },
)
async def create_user(
    request: CreateUserRequest,
    command: CreateUserCommandDep,
) -> ApiResponse[UserResponse]:
    # The command commits before publishing user.created
    user = await command.execute(
        name=request.name,
        email=request.email,
        password=request.password,
    )

    return ApiResponse[UserResponse].ok(
        message="User created successfully",
        data=UserResponse.from_domain(user),
    )


@router.get(
    "/{user_id}",
    summary="Get a user",
    response_model_exclude_unset=True,
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
async def get_user(
    user_id: UserIdPath,
    query: GetUserQueryDep,
) -> ApiResponse[UserResponse]:
    user = await query.execute(user_id)
    return ApiResponse[UserResponse].ok(data=UserResponse.from_domain(user))


@router.put(
    "/{user_id}",
    summary="Update a user",
    response_model_exclude_unset=True,
    responses={
        400: {"model": ErrorResponse, "description": "Email already taken"},
        **UNAUTHORIZED,
        **NOT_FOUND,
        **VALIDATION,
    },
)
async def update_user(
    user_id: UserIdPath,
    request: UpdateUserRequest,
    command: UpdateUserCommandDep,
    session: DBSession,
) -> ApiResponse[UserResponse]:
    user = await command.execute(
        user_id,
        name=request.name,
        email=request.email,
        password=request.password,
    )
    await session.commit()

    return ApiResponse[UserResponse].ok(
        message="User updated successfully",
        data=UserResponse.from_domain(user),
    )


@router.delete(
    "/{user_id}",
    summary="Delete a user",
    response_model_exclude_unset=True,
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
async def delete_user(
    user_id: UserIdPath,
    command: DeleteUserCommandDep,
    session: DBSession,
) -> MessageResponse:
    await command.execute(user_id)
    await session.commit()

    logger.info("User %s deleted via API", user_id)
    return MessageResponse(success=True, message="User deleted successfully")
