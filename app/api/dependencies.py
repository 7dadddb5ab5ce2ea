"""공유 API dependencies - 엔드포인트 간 중복 제거"""

from functools import lru_cache
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.exceptions import ServiceError
from app.models.user import User
from app.services.agenda_service import AgendaService
from app.services.auth_service import AuthService
from app.services.meeting_session_service import MeetingSessionService
from app.services.profile_extraction_service import ProfileExtractionService
from app.services.team_member_service import TeamMemberService
from app.services.team_service import TeamService

security = HTTPBearer(auto_error=False)


# ===== Auth Dependencies =====


def get_auth_service(db: Annotated[AsyncSession, Depends(get_db)]) -> AuthService:
    """AuthService 의존성"""
    return AuthService(db)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """현재 사용자 조회"""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "INVALID_TOKEN", "message": "Authentication required"},
        )
    try:
        return await auth_service.get_current_user(credentials.credentials)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"error": "INVALID_TOKEN", "message": "Invalid or expired token"},
        )


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_current_user_id(
    current_user: CurrentUser,
) -> UUID:
    """현재 사용자 ID"""
    return current_user.id


CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]


# ===== Service Dependencies =====


def get_team_service(db: Annotated[AsyncSession, Depends(get_db)]) -> TeamService:
    """TeamService 의존성"""
    return TeamService(db)


def get_team_member_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TeamMemberService:
    """TeamMemberService 의존성"""
    return TeamMemberService(db)


def get_agenda_service(db: Annotated[AsyncSession, Depends(get_db)]) -> AgendaService:
    """AgendaService 의존성"""
    return AgendaService(db)


def get_meeting_session_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MeetingSessionService:
    """MeetingSessionService 의존성"""
    return MeetingSessionService(db)


@lru_cache
def get_profile_extraction_service() -> ProfileExtractionService:
    """ProfileExtractionService 싱글톤 (OpenAI 클라이언트 재사용)"""
    return ProfileExtractionService()


# ===== Service Error Handling =====

# 서비스 레이어에서 발생하는 에러 코드와 HTTP 응답 매핑
# (status_code, error_code, message)
SERVICE_ERROR_MAPPING: dict[str, tuple[int, str, str]] = {
    # 인증
    "INVALID_TOKEN": (401, "INVALID_TOKEN", "Invalid or expired token"),
    "INVALID_CREDENTIALS": (401, "INVALID_CREDENTIALS", "Invalid email or password"),
    "USER_NOT_FOUND": (401, "INVALID_TOKEN", "User not found"),
    "EMAIL_EXISTS": (409, "EMAIL_EXISTS", "Email already exists"),
    # 소유권
    "PERMISSION_DENIED": (403, "FORBIDDEN", "Access denied"),
    "TEAM_NOT_FOUND": (404, "NOT_FOUND", "Team not found"),
    "MEMBER_NOT_FOUND": (404, "NOT_FOUND", "Team member not found"),
    "AGENDA_ITEM_NOT_FOUND": (404, "NOT_FOUND", "Agenda item not found"),
    # 미팅 세션
    "SESSION_ALREADY_OPEN": (409, "CONFLICT", "A meeting is already in progress"),
    "NO_ACTIVE_SESSION": (404, "NOT_FOUND", "No active meeting session found"),
    # 입력 검증
    "NAME_REQUIRED": (400, "VALIDATION_ERROR", "Name is required"),
    "CONTENT_REQUIRED": (400, "VALIDATION_ERROR", "Content is required"),
    "TEXT_REQUIRED": (400, "VALIDATION_ERROR", "Text input is required"),
    # 외부 서비스
    "OPENAI_NOT_CONFIGURED": (502, "EXTERNAL_SERVICE_ERROR", "Failed to extract profile"),
    "PROFILE_EXTRACTION_FAILED": (502, "EXTERNAL_SERVICE_ERROR", "Failed to extract profile"),
    "EMPTY_COMPLETION": (502, "EXTERNAL_SERVICE_ERROR", "No response from AI"),
    "MALFORMED_COMPLETION": (502, "EXTERNAL_SERVICE_ERROR", "Failed to extract profile"),
}


def handle_service_error(error: ValueError, default_message: str = "Validation error") -> None:
    """서비스 레이어 에러를 HTTPException으로 변환

    Args:
        error: 서비스에서 발생한 ValueError (에러 코드가 str로 전달됨)
        default_message: 매핑되지 않은 에러의 기본 메시지

    Raises:
        HTTPException: 매핑된 HTTP 에러 응답
    """
    error_code = str(error)

    if error_code in SERVICE_ERROR_MAPPING:
        status_code, code, message = SERVICE_ERROR_MAPPING[error_code]
        raise HTTPException(
            status_code=status_code,
            detail={"error": code, "message": message},
        )

    if isinstance(error, ServiceError):
        raise HTTPException(
            status_code=error.status_code,
            detail={"error": error.error, "message": error.message or default_message},
        )

    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": "VALIDATION_ERROR", "message": default_message},
    )
