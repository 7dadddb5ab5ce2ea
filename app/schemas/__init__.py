from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from app.schemas.common import ErrorResponse, PaginationMeta

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "LoginRequest",
    "PaginationMeta",
    "RefreshTokenRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
]
