"""소유권 확인 공통 로직

모든 쓰기/읽기 전에 아젠다 → 팀원 → 팀 → 사용자 순으로 소유자를 추적합니다.
- 엔티티가 없으면 NotFoundError
- 엔티티는 있지만 다른 사용자 소유면 AccessDeniedError
"""

from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AccessDeniedError, NotFoundError
from app.models.agenda import AgendaItem
from app.models.meeting_session import MeetingSession
from app.models.team import Team, TeamMember


class OwnedResourceService:
    """소유권 확인 헬퍼를 제공하는 서비스 기본 클래스"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_owned_team(self, team_id: UUID, user_id: UUID) -> Team:
        """팀 조회 + 소유자 확인"""
        query = select(Team).where(Team.id == team_id)
        result = await self.db.execute(query)
        team = result.scalar_one_or_none()

        if not team:
            raise NotFoundError("TEAM_NOT_FOUND")
        if team.owner_user_id != user_id:
            raise AccessDeniedError("PERMISSION_DENIED")
        return team

    async def _get_owned_member(self, member_id: UUID, user_id: UUID) -> TeamMember:
        """팀원 조회 + 팀 소유자 확인"""
        query = (
            select(TeamMember, Team.owner_user_id)
            .join(Team, TeamMember.team_id == Team.id)
            .where(TeamMember.id == member_id)
        )
        row = (await self.db.execute(query)).first()

        if not row:
            raise NotFoundError("MEMBER_NOT_FOUND")
        member, owner_user_id = row
        if owner_user_id != user_id:
            raise AccessDeniedError("PERMISSION_DENIED")
        return member

    async def _get_owned_agenda_item(self, item_id: UUID, user_id: UUID) -> AgendaItem:
        """아젠다 조회 + 팀원 → 팀 소유자 확인"""
        query = (
            select(AgendaItem, Team.owner_user_id)
            .join(TeamMember, AgendaItem.team_member_id == TeamMember.id)
            .join(Team, TeamMember.team_id == Team.id)
            .where(AgendaItem.id == item_id)
        )
        row = (await self.db.execute(query)).first()

        if not row:
            raise NotFoundError("AGENDA_ITEM_NOT_FOUND")
        item, owner_user_id = row
        if owner_user_id != user_id:
            raise AccessDeniedError("PERMISSION_DENIED")
        return item

    async def _has_open_session(self, member_id: UUID) -> bool:
        """진행 중 미팅 세션 존재 여부"""
        query = select(
            exists().where(
                MeetingSession.team_member_id == member_id,
                MeetingSession.ended_at.is_(None),
            )
        )
        return bool((await self.db.execute(query)).scalar())
