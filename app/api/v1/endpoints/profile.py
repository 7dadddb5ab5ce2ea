"""프로필 추출 API

POST /api/profile/extract  body: {"text": "..."}
성공 시 5개 프로필 필드(snake_case, 없으면 null), 실패 시 {"error": "..."}.
"""

import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.api.dependencies import (
    SERVICE_ERROR_MAPPING,
    CurrentUserId,
    get_profile_extraction_service,
)
from app.core.exceptions import ExternalServiceError, ValidationError
from app.schemas.profile import ExtractedProfile, ProfileExtractErrorResponse
from app.services.profile_extraction_service import ProfileExtractionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/profile", tags=["Profile"])

TEXT_REQUIRED_MESSAGE = "Text input is required"
EXTRACTION_FAILED_MESSAGE = "Failed to extract profile"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/extract",
    response_model=ExtractedProfile,
    responses={
        400: {"model": ProfileExtractErrorResponse},
        500: {"model": ProfileExtractErrorResponse},
    },
)
async def extract_profile(
    request: Request,
    _user_id: CurrentUserId,
    service: Annotated[ProfileExtractionService, Depends(get_profile_extraction_service)],
):
    """매니저 메모에서 팀원 프로필 추출"""
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None

    text = payload.get("text") if isinstance(payload, dict) else None
    if not isinstance(text, str) or not text.strip():
        return _error(status.HTTP_400_BAD_REQUEST, TEXT_REQUIRED_MESSAGE)

    try:
        return await service.extract(text)
    except ValidationError:
        return _error(status.HTTP_400_BAD_REQUEST, TEXT_REQUIRED_MESSAGE)
    except ExternalServiceError as e:
        logger.error("Error extracting profile: %s", e)
        _, _, message = SERVICE_ERROR_MAPPING.get(e.code, (None, None, EXTRACTION_FAILED_MESSAGE))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
