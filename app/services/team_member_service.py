import logging
from uuid import UUID

from sqlalchemy import select

from app.core.exceptions import ValidationError
from app.models.meeting_session import MeetingSession
from app.models.team import PROFILE_FIELDS, TeamMember
from app.schemas.team_member import (
    CreateTeamMemberRequest,
    TeamMemberResponse,
    UpdateMemberProfileRequest,
    UpdateTeamMemberRequest,
)
from app.services.ownership import OwnedResourceService

logger = logging.getLogger(__name__)


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class TeamMemberService(OwnedResourceService):
    """팀원 서비스"""

    async def create_member(
        self,
        team_id: UUID,
        data: CreateTeamMemberRequest,
        user_id: UUID,
    ) -> TeamMemberResponse:
        """팀원 추가"""
        team = await self._get_owned_team(team_id, user_id)

        name = data.name.strip()
        if not name:
            raise ValidationError("NAME_REQUIRED")

        member = TeamMember(team_id=team.id, name=name)
        self.db.add(member)
        await self.db.flush()
        await self.db.refresh(member)

        return self._to_response(member, has_active_session=False)

    async def list_members(
        self,
        team_id: UUID,
        user_id: UUID,
    ) -> list[TeamMemberResponse]:
        """팀원 목록 조회 (최신순)"""
        team = await self._get_owned_team(team_id, user_id)

        query = (
            select(TeamMember)
            .where(TeamMember.team_id == team.id)
            .order_by(TeamMember.created_at.desc())
        )
        members = (await self.db.execute(query)).scalars().all()

        # 진행 중 세션이 있는 팀원 ID
        open_query = select(MeetingSession.team_member_id).where(
            MeetingSession.team_member_id.in_([m.id for m in members]),
            MeetingSession.ended_at.is_(None),
        )
        active_ids = set((await self.db.execute(open_query)).scalars().all())

        return [self._to_response(m, has_active_session=m.id in active_ids) for m in members]

    async def get_member(self, member_id: UUID, user_id: UUID) -> TeamMemberResponse:
        """팀원 상세 조회"""
        member = await self._get_owned_member(member_id, user_id)

        return self._to_response(
            member, has_active_session=await self._has_open_session(member.id)
        )

    async def update_member(
        self,
        member_id: UUID,
        data: UpdateTeamMemberRequest,
        user_id: UUID,
    ) -> TeamMemberResponse:
        """팀원 이름 수정"""
        member = await self._get_owned_member(member_id, user_id)

        name = data.name.strip()
        if not name:
            raise ValidationError("NAME_REQUIRED")

        member.name = name
        await self.db.flush()
        await self.db.refresh(member)

        return self._to_response(
            member, has_active_session=await self._has_open_session(member.id)
        )

    async def update_member_profile(
        self,
        member_id: UUID,
        data: UpdateMemberProfileRequest,
        user_id: UUID,
    ) -> TeamMemberResponse:
        """팀원 프로필 저장 (빈 문자열은 null로 저장)"""
        member = await self._get_owned_member(member_id, user_id)

        for field in PROFILE_FIELDS:
            setattr(member, field, _blank_to_none(getattr(data, field)))
        member.profile_raw_input = _blank_to_none(data.profile_raw_input)

        await self.db.flush()
        await self.db.refresh(member)
        logger.info("Member profile saved: member=%s", member.id)

        return self._to_response(
            member, has_active_session=await self._has_open_session(member.id)
        )

    async def delete_member(self, member_id: UUID, user_id: UUID) -> None:
        """팀원 삭제 (아젠다와 세션 포함)"""
        member = await self._get_owned_member(member_id, user_id)

        await self.db.delete(member)
        await self.db.flush()

    @staticmethod
    def _to_response(member: TeamMember, has_active_session: bool) -> TeamMemberResponse:
        return TeamMemberResponse(
            id=member.id,
            team_id=member.team_id,
            name=member.name,
            role=member.role,
            current_focus=member.current_focus,
            growth_goals=member.growth_goals,
            one_on_one_themes=member.one_on_one_themes,
            feedback_preferences=member.feedback_preferences,
            profile_raw_input=member.profile_raw_input,
            has_profile=member.has_profile,
            has_active_session=has_active_session,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )
