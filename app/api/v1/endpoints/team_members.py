from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.api.dependencies import (
    CurrentUserId,
    get_team_member_service,
    handle_service_error,
)
from app.schemas import ErrorResponse
from app.schemas.team_member import (
    CreateTeamMemberRequest,
    TeamMemberResponse,
    UpdateMemberProfileRequest,
    UpdateTeamMemberRequest,
)
from app.services.team_member_service import TeamMemberService

# 팀 하위 팀원 목록/생성
team_members_router = APIRouter(prefix="/teams/{team_id}/members", tags=["Team Members"])
# 팀원 단건
router = APIRouter(prefix="/members", tags=["Team Members"])


@team_members_router.post(
    "",
    response_model=TeamMemberResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def create_member(
    team_id: UUID,
    data: CreateTeamMemberRequest,
    user_id: CurrentUserId,
    service: Annotated[TeamMemberService, Depends(get_team_member_service)],
) -> TeamMemberResponse:
    """팀원 추가"""
    try:
        return await service.create_member(team_id, data, user_id)
    except ValueError as e:
        handle_service_error(e)


@team_members_router.get(
    "",
    response_model=list[TeamMemberResponse],
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def list_members(
    team_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[TeamMemberService, Depends(get_team_member_service)],
) -> list[TeamMemberResponse]:
    """팀원 목록"""
    try:
        return await service.list_members(team_id, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.get(
    "/{member_id}",
    response_model=TeamMemberResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def get_member(
    member_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[TeamMemberService, Depends(get_team_member_service)],
) -> TeamMemberResponse:
    """팀원 상세"""
    try:
        return await service.get_member(member_id, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.patch(
    "/{member_id}",
    response_model=TeamMemberResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_member(
    member_id: UUID,
    data: UpdateTeamMemberRequest,
    user_id: CurrentUserId,
    service: Annotated[TeamMemberService, Depends(get_team_member_service)],
) -> TeamMemberResponse:
    """팀원 이름 수정"""
    try:
        return await service.update_member(member_id, data, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.put(
    "/{member_id}/profile",
    response_model=TeamMemberResponse,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_member_profile(
    member_id: UUID,
    data: UpdateMemberProfileRequest,
    user_id: CurrentUserId,
    service: Annotated[TeamMemberService, Depends(get_team_member_service)],
) -> TeamMemberResponse:
    """팀원 프로필 저장"""
    try:
        return await service.update_member_profile(member_id, data, user_id)
    except ValueError as e:
        handle_service_error(e)


@router.delete(
    "/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def delete_member(
    member_id: UUID,
    user_id: CurrentUserId,
    service: Annotated[TeamMemberService, Depends(get_team_member_service)],
) -> None:
    """팀원 삭제 (아젠다, 세션 포함)"""
    try:
        await service.delete_member(member_id, user_id)
    except ValueError as e:
        handle_service_error(e)
