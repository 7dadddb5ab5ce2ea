"""미팅 세션 API 엔드포인트

세션 상태: 없음 → 진행 중 (start) → 종료 (end). 종료된 세션은 다시 열 수 없고,
다시 시작하면 새 세션이 만들어집니다.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import (
    CurrentUserId,
    get_meeting_session_service,
    handle_service_error,
)
from app.schemas import ErrorResponse
from app.schemas.agenda import AgendaItemResponse
from app.schemas.meeting_session import (
    ActiveMeetingSessionResponse,
    MeetingSessionResponse,
    MeetingSessionSummary,
)
from app.services.meeting_session_service import MeetingSessionService

router = APIRouter(prefix="/members/{member_id}/meeting-sessions", tags=["Meeting Sessions"])


@router.post(
    "",
    response_model=MeetingSessionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def start_meeting_session(
    member_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[MeetingSessionService, Depends(get_meeting_session_service)],
    today: date | None = Query(default=None, description="클라이언트 로컬 날짜"),
) -> MeetingSessionResponse:
    """미팅 시작 (관련 아젠다 스냅샷)"""
    try:
        return await service.start_meeting_session(member_id, user_id, today)
    except ValueError as e:
        handle_service_error(e)


@router.get(
    "",
    response_model=list[MeetingSessionSummary],
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def list_meeting_sessions(
    member_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[MeetingSessionService, Depends(get_meeting_session_service)],
) -> list[MeetingSessionSummary]:
    """미팅 세션 이력"""
    try:
        return await service.list_sessions(member_id, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.get(
    "/active",
    response_model=ActiveMeetingSessionResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def get_active_meeting_session(
    member_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[MeetingSessionService, Depends(get_meeting_session_service)],
) -> ActiveMeetingSessionResponse:
    """진행 중 미팅과 아젠다"""
    try:
        return await service.get_active_session(member_id, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.get(
    "/active/agenda-items",
    response_model=list[AgendaItemResponse],
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def get_active_meeting_agenda_items(
    member_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[MeetingSessionService, Depends(get_meeting_session_service)],
) -> list[AgendaItemResponse]:
    """진행 중 미팅의 아젠다 (추가된 순서)"""
    try:
        return await service.get_active_session_agenda_items(member_id, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.post(
    "/active/end",
    response_model=MeetingSessionResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def end_meeting_session(
    member_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[MeetingSessionService, Depends(get_meeting_session_service)],
) -> MeetingSessionResponse:
    """미팅 종료"""
    try:
        return await service.end_meeting_session(member_id, user_id)
    except ValueError as e:
        handle_service_error(e)
