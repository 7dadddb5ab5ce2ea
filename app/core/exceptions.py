"""서비스 레이어 예외

서비스는 에러 코드(str)를 담은 예외를 던지고, 엔드포인트에서
handle_service_error로 HTTP 응답에 매핑합니다.
ValueError를 상속하므로 기존 `except ValueError` 처리와 호환됩니다.
"""

from fastapi import status


class ServiceError(ValueError):
    """서비스 에러 기본 클래스"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error: str = "BAD_REQUEST"

    def __init__(self, code: str, message: str | None = None):
        super().__init__(code)
        self.code = code
        self.message = message


class AuthenticationError(ServiceError):
    """유효한 인증 정보 없음"""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "UNAUTHORIZED"


class NotFoundError(ServiceError):
    """대상 엔티티 없음"""

    status_code = status.HTTP_404_NOT_FOUND
    error = "NOT_FOUND"


class AccessDeniedError(ServiceError):
    """엔티티는 있지만 요청자 소유가 아님"""

    status_code = status.HTTP_403_FORBIDDEN
    error = "FORBIDDEN"


class ConflictError(ServiceError):
    """중복 상태 (예: 이미 진행 중인 미팅 세션)"""

    status_code = status.HTTP_409_CONFLICT
    error = "CONFLICT"


class ValidationError(ServiceError):
    """필수 텍스트 누락 등 입력 오류"""

    status_code = status.HTTP_400_BAD_REQUEST
    error = "VALIDATION_ERROR"


class ExternalServiceError(ServiceError):
    """외부 API (OpenAI) 호출 또는 응답 파싱 실패"""

    status_code = status.HTTP_502_BAD_GATEWAY
    error = "EXTERNAL_SERVICE_ERROR"
