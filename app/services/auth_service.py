"""매니저 계정 인증 서비스

이메일 + 비밀번호 계정과 access/refresh JWT 쌍만 다룹니다.
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AuthenticationError, ConflictError
from app.core.security import (
    create_tokens,
    decode_token,
    get_password_hash,
    verify_password,
)
from app.models.user import User
from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)


def _issue_tokens(user: User) -> TokenResponse:
    return TokenResponse(**create_tokens(str(user.id)))


class AuthService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_user_by_id(self, user_id: str | UUID) -> User | None:
        """ID로 사용자 조회 (UUID 형식이 아니면 None)"""
        if not isinstance(user_id, UUID):
            try:
                user_id = UUID(user_id)
            except ValueError:
                return None
        return await self.db.get(User, user_id)

    async def _resolve_token_user(self, token: str, token_type: str) -> User:
        """토큰 타입과 subject를 검증하고 사용자 반환

        Raises:
            AuthenticationError: INVALID_TOKEN, USER_NOT_FOUND
        """
        payload = decode_token(token)
        if not payload or payload.get("type") != token_type or not payload.get("sub"):
            raise AuthenticationError("INVALID_TOKEN")

        user = await self.get_user_by_id(payload["sub"])
        if user is None:
            raise AuthenticationError("USER_NOT_FOUND")
        return user

    async def register(self, data: RegisterRequest) -> AuthResponse:
        """회원가입 후 바로 토큰 발급

        Raises:
            ConflictError: EMAIL_EXISTS
        """
        if await self.get_user_by_email(data.email):
            raise ConflictError("EMAIL_EXISTS")

        user = User(
            email=data.email,
            name=data.name,
            hashed_password=get_password_hash(data.password),
        )
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)

        logger.info("User registered: user_id=%s", user.id)
        return AuthResponse(user=UserResponse.model_validate(user), tokens=_issue_tokens(user))

    async def login(self, data: LoginRequest) -> AuthResponse:
        """로그인

        없는 이메일과 틀린 비밀번호는 같은 INVALID_CREDENTIALS로 응답합니다.
        """
        user = await self.get_user_by_email(data.email)
        if (
            user is None
            or not user.hashed_password
            or not verify_password(data.password, user.hashed_password)
        ):
            logger.warning("Login failed: email=%s", data.email)
            raise AuthenticationError("INVALID_CREDENTIALS")

        return AuthResponse(user=UserResponse.model_validate(user), tokens=_issue_tokens(user))

    async def refresh_token(self, refresh_token: str) -> TokenResponse:
        user = await self._resolve_token_user(refresh_token, "refresh")
        return _issue_tokens(user)

    async def get_current_user(self, access_token: str) -> User:
        return await self._resolve_token_user(access_token, "access")
