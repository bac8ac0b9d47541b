"""Authentication router: login, logout and the current user's profile."""

import logging

from fastapi import APIRouter, status

from userhub.presentation.api.dependencies import (
    AccessToken,
    CurrentUser,
    DBSession,
    JWTServiceDep,
    LoginUserCommandDep,
    RevokedTokensDep,
)
from userhub.presentation.api.schemas import (
    ApiResponse,
    ErrorResponse,
    LoginData,
    LoginRequest,
    MessageResponse,
    UserResponse,
)
from userhub_auth import JWTService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    summary="Log in and obtain an access token",
    response_model_exclude_unset=True,
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
        422: {"model": ErrorResponse, "description": "Validation failed"},
    },
)
async def login(
    request: LoginRequest,
    command: LoginUserCommandDep,
    jwt_service: JWTServiceDep,
) -> ApiResponse[LoginData]:
    result = await command.execute(email=request.email, password=request.password)
    user = result.user

    access_token = jwt_service.create_access_token(user.id, user.email)
    return ApiResponse[LoginData].ok(
        message=result.message,
        data=LoginData(
            user=UserResponse.from_domain(user),
            access_token=access_token,
            token_type=JWTService.TOKEN_TYPE,
            expires_in=jwt_service.access_token_expire_seconds,
        ),
    )


@router.post(
    "/logout",
    summary="Revoke the access token used for this request",
    status_code=status.HTTP_200_OK,
    response_model_exclude_unset=True,
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def logout(
    token: AccessToken,
    revoked_tokens: RevokedTokensDep,
    session: DBSession,
) -> MessageResponse:
    await revoked_tokens.revoke(token.jti, token.user_id, token.exp)
    # Prune entries whose tokens have expired
    await revoked_tokens.cleanup_expired()
    await session.commit()

    logger.info("User %s logged out", token.user_id)
    return MessageResponse(success=True, message="Logged out successfully")


@router.get(
    "/me",
    summary="Get the authenticated user's profile",
    response_model_exclude_unset=True,
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def me(current_user: CurrentUser) -> ApiResponse[UserResponse]:
    return ApiResponse[UserResponse].ok(data=UserResponse.from_domain(current_user))
