"""매니저 계정 API (회원가입, 로그인, 토큰 갱신, 내 정보)"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.dependencies import CurrentUser, get_auth_service, handle_service_error
from app.schemas import (
    AuthResponse,
    ErrorResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def register(data: RegisterRequest, auth_service: AuthServiceDep) -> AuthResponse:
    try:
        return await auth_service.register(data)
    except ValueError as e:
        handle_service_error(e)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(data: LoginRequest, auth_service: AuthServiceDep) -> AuthResponse:
    try:
        return await auth_service.login(data)
    except ValueError as e:
        handle_service_error(e)


@router.post(
    "/refresh",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
async def refresh_token(data: RefreshTokenRequest, auth_service: AuthServiceDep) -> TokenResponse:
    """refresh token으로 새 토큰 쌍 발급"""
    try:
        return await auth_service.refresh_token(data.refresh_token)
    except ValueError as e:
        handle_service_error(e)


@router.get(
    "/me",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}},
)
async def get_me(current_user: CurrentUser) -> UserResponse:
    return UserResponse.model_validate(current_user)
