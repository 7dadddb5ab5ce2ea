"""아젠다 API 엔드포인트

팀원 하위 목록/생성과 아젠다 단건 수정/삭제.
"""

from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import CurrentUserId, get_agenda_service, handle_service_error
from app.schemas import ErrorResponse
from app.schemas.agenda import (
    AgendaItemResponse,
    AgendaScope,
    CreateAgendaItemRequest,
    UpdateAgendaItemRequest,
)
from app.services.agenda_service import AgendaService

member_agenda_router = APIRouter(
    prefix="/members/{member_id}/agenda-items", tags=["Agenda Items"]
)
router = APIRouter(prefix="/agenda-items", tags=["Agenda Items"])


@member_agenda_router.post(
    "",
    response_model=AgendaItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def create_agenda_item(
    member_id: UUID,
    data: CreateAgendaItemRequest,
    user_id: CurrentUserId,
    service: Annotated[AgendaService, Depends(get_agenda_service)],
) -> AgendaItemResponse:
    """아젠다 추가 (미팅 진행 중이면 미팅 목록에도 추가)"""
    try:
        return await service.create_agenda_item(member_id, data, user_id)
    except ValueError as e:
        handle_service_error(e)


@member_agenda_router.get(
    "",
    response_model=list[AgendaItemResponse],
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def list_agenda_items(
    member_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[AgendaService, Depends(get_agenda_service)],
    scope: AgendaScope = Query(default=AgendaScope.ALL),
    today: date | None = Query(default=None, description="클라이언트 로컬 날짜"),
) -> list[AgendaItemResponse]:
    """아젠다 목록 (all / relevant / future / completed)"""
    try:
        return await service.list_agenda_items(member_id, user_id, scope, today)
    except ValueError as e:
        handle_service_error(e)


@router.patch(
    "/{item_id}",
    response_model=AgendaItemResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_agenda_item(
    item_id: UUID,
    data: UpdateAgendaItemRequest,
    user_id: CurrentUserId,
    service: Annotated[AgendaService, Depends(get_agenda_service)],
) -> AgendaItemResponse:
    """아젠다 수정"""
    try:
        return await service.update_agenda_item(item_id, data, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.post(
    "/{item_id}/toggle",
    response_model=AgendaItemResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def toggle_agenda_item(
    item_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[AgendaService, Depends(get_agenda_service)],
) -> AgendaItemResponse:
    """완료 여부 토글"""
    try:
        return await service.toggle_agenda_item(item_id, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def delete_agenda_item(
    item_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[AgendaService, Depends(get_agenda_service)],
) -> None:
    """아젠다 삭제"""
    try:
        await service.delete_agenda_item(item_id, user_id)
    except ValueError as e:
        handle_service_error(e)
