from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import CurrentUserId, get_team_service, handle_service_error
from app.schemas import ErrorResponse
from app.schemas.team import (
    CreateTeamRequest,
    TeamListResponse,
    TeamResponse,
    TeamWithMembersResponse,
    UpdateTeamRequest,
)
from app.services.team_service import TeamService

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.post(
    "",
    response_model=TeamResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
    },
)
async def create_team(
    data: CreateTeamRequest,
    user_id: CurrentUserId,
    team_service: Annotated[TeamService, Depends(get_team_service)],
) -> TeamResponse:
    """팀 생성"""
    try:
        return await team_service.create_team(data, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.get(
    "",
    response_model=TeamListResponse,
    responses={401: {"model": ErrorResponse}},
)
async def list_my_teams(
    user_id: CurrentUserId,
    team_service: Annotated[TeamService, Depends(get_team_service)],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> TeamListResponse:
    """내 팀 목록"""
    return await team_service.list_my_teams(user_id, page, limit)


@router.get(
    "/{team_id}",
    response_model=TeamWithMembersResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def get_team(
    team_id: UUID,
    user_id: CurrentUserId,
    team_service: Annotated[TeamService, Depends(get_team_service)],
    today: date | None = Query(default=None, description="클라이언트 로컬 날짜"),
) -> TeamWithMembersResponse:
    """팀 상세 조회"""
    try:
        return await team_service.get_team(team_id, user_id, today)
    except ValueError as e:
        handle_service_error(e)


@router.patch(
    "/{team_id}",
    response_model=TeamResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_team(
    team_id: UUID,
    data: UpdateTeamRequest,
    user_id: CurrentUserId,
    team_service: Annotated[TeamService, Depends(get_team_service)],
) -> TeamResponse:
    """팀 이름 변경"""
    try:
        return await team_service.update_team(team_id, data, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.delete(
    "/{team_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def delete_team(
    team_id: UUID,
    user_id: CurrentUserId,
    team_service: Annotated[TeamService, Depends(get_team_service)],
) -> None:
    """팀 삭제"""
    try:
        await team_service.delete_team(team_id, user_id)
    except ValueError as e:
        handle_service_error(e)
