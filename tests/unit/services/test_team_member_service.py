"""팀원 서비스 단위 테스트"""

from uuid import uuid4

import pytest

from app.core.exceptions import AccessDeniedError, NotFoundError, ValidationError
from app.models.team import Team, TeamMember
from app.models.user import User
from app.schemas.team_member import (
    CreateTeamMemberRequest,
    UpdateMemberProfileRequest,
    UpdateTeamMemberRequest,
)
from app.services.meeting_session_service import MeetingSessionService
from app.services.team_member_service import TeamMemberService


@pytest.mark.asyncio
async def test_create_member_success(db_session, test_user: User, test_team: Team):
    """팀원 추가 (프로필 없음)"""
    service = TeamMemberService(db_session)

    result = await service.create_member(
        test_team.id, CreateTeamMemberRequest(name=" 이개발 "), test_user.id
    )

    assert result.name == "이개발"
    assert result.team_id == test_team.id
    assert result.has_profile is False
    assert result.has_active_session is False


@pytest.mark.asyncio
async def test_create_member_not_owner(db_session, test_user2: User, test_team: Team):
    """다른 사용자의 팀에 팀원 추가 불가"""
    service = TeamMemberService(db_session)

    with pytest.raises(AccessDeniedError, match="PERMISSION_DENIED"):
        await service.create_member(
            test_team.id, CreateTeamMemberRequest(name="침입자"), test_user2.id
        )


@pytest.mark.asyncio
async def test_list_members_with_active_flag(
    db_session, test_user: User, test_team: Team, test_member: TeamMember
):
    """팀원 목록 (진행 중 세션 여부 포함)"""
    service = TeamMemberService(db_session)
    other = await service.create_member(
        test_team.id, CreateTeamMemberRequest(name="박디자인"), test_user.id
    )
    await MeetingSessionService(db_session).start_meeting_session(test_member.id, test_user.id)

    result = await service.list_members(test_team.id, test_user.id)

    flags = {m.id: m.has_active_session for m in result}
    assert flags == {test_member.id: True, other.id: False}


@pytest.mark.asyncio
async def test_get_member_not_found(db_session, test_user: User):
    """존재하지 않는 팀원"""
    service = TeamMemberService(db_session)

    with pytest.raises(NotFoundError, match="MEMBER_NOT_FOUND"):
        await service.get_member(uuid4(), test_user.id)


@pytest.mark.asyncio
async def test_update_member_blank_name(db_session, test_user: User, test_member: TeamMember):
    """공백 이름 거부"""
    service = TeamMemberService(db_session)

    with pytest.raises(ValidationError, match="NAME_REQUIRED"):
        await service.update_member(
            test_member.id, UpdateTeamMemberRequest(name="  "), test_user.id
        )


@pytest.mark.asyncio
async def test_update_member_profile(db_session, test_user: User, test_member: TeamMember):
    """프로필 저장 (빈 문자열은 null)"""
    service = TeamMemberService(db_session)

    result = await service.update_member_profile(
        test_member.id,
        UpdateMemberProfileRequest(
            role="백엔드 엔지니어",
            current_focus="결제 시스템 마이그레이션",
            growth_goals="",
            profileRawInput="결제 담당 백엔드 엔지니어, 리드 역할에 관심",
        ),
        test_user.id,
    )

    assert result.role == "백엔드 엔지니어"
    assert result.current_focus == "결제 시스템 마이그레이션"
    assert result.growth_goals is None
    assert result.one_on_one_themes is None
    assert result.profile_raw_input == "결제 담당 백엔드 엔지니어, 리드 역할에 관심"
    assert result.has_profile is True


@pytest.mark.asyncio
async def test_delete_member(db_session, test_user: User, test_member: TeamMember):
    """팀원 삭제"""
    service = TeamMemberService(db_session)

    await service.delete_member(test_member.id, test_user.id)

    with pytest.raises(NotFoundError, match="MEMBER_NOT_FOUND"):
        await service.get_member(test_member.id, test_user.id)
