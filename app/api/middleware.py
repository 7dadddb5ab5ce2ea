"""토큰 자동 갱신 미들웨어

만료가 임박한(기본 5분 이내) 유효 access token으로 들어온 요청에는
응답 헤더로 새 access token을 내려줘 요청 도중 인증이 끊기지 않게 합니다.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.core.security import create_access_token, decode_token, should_refresh_access_token

logger = logging.getLogger(__name__)

REFRESHED_TOKEN_HEADER = "X-Refreshed-Access-Token"


def _extract_bearer_token(request: Request) -> str | None:
    authorization = request.headers.get("Authorization")
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


class TokenRefreshMiddleware(BaseHTTPMiddleware):
    """만료 임박 access token 선제 갱신"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        token = _extract_bearer_token(request)
        response = await call_next(request)

        # 인증 실패 응답에는 토큰을 붙이지 않음
        if token and response.status_code != 401 and should_refresh_access_token(token):
            payload = decode_token(token) or {}
            subject = payload.get("sub")
            if subject:
                response.headers[REFRESHED_TOKEN_HEADER] = create_access_token(subject)
                logger.debug("Access token refreshed: sub=%s", subject)

        return response
