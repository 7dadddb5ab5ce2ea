import math
from datetime import date
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from app.core.clock import resolve_today
from app.core.exceptions import ValidationError
from app.models.team import Team, TeamMember
from app.schemas.common import PaginationMeta
from app.schemas.team import (
    CreateTeamRequest,
    TeamListResponse,
    TeamMemberSummary,
    TeamResponse,
    TeamWithMembersResponse,
    UpdateTeamRequest,
)
from app.services.meeting_session_service import is_relevant_now_open
from app.services.ownership import OwnedResourceService
from app.utils.relations import one_or_none


class TeamService(OwnedResourceService):
    """팀 서비스"""

    async def create_team(self, data: CreateTeamRequest, user_id: UUID) -> TeamResponse:
        """팀 생성 (요청 사용자가 소유자)"""
        name = data.name.strip()
        if not name:
            raise ValidationError("NAME_REQUIRED")

        team = Team(name=name, owner_user_id=user_id)
        self.db.add(team)
        await self.db.flush()
        await self.db.refresh(team)

        return TeamResponse.model_validate(team)

    async def list_my_teams(
        self, user_id: UUID, page: int = 1, limit: int = 20
    ) -> TeamListResponse:
        """내 팀 목록 조회 (최신순)"""
        count_query = (
            select(func.count()).select_from(Team).where(Team.owner_user_id == user_id)
        )
        total = (await self.db.execute(count_query)).scalar() or 0

        # 페이지네이션
        offset = (page - 1) * limit
        query = (
            select(Team)
            .where(Team.owner_user_id == user_id)
            .order_by(Team.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(query)
        teams = result.scalars().all()

        return TeamListResponse(
            items=[TeamResponse.model_validate(team) for team in teams],
            meta=PaginationMeta(
                page=page,
                limit=limit,
                total=total,
                total_pages=math.ceil(total / limit) if total > 0 else 0,
            ),
        )

    async def get_team(
        self, team_id: UUID, user_id: UUID, today: date | None = None
    ) -> TeamWithMembersResponse:
        """팀 상세 조회 (팀원 카드 포함)"""
        team = await self._get_owned_team(team_id, user_id)

        query = (
            select(TeamMember)
            .options(
                selectinload(TeamMember.agenda_items),
                selectinload(TeamMember.meeting_sessions),
            )
            .where(TeamMember.team_id == team.id)
            .order_by(TeamMember.created_at.desc())
            .execution_options(populate_existing=True)
        )
        members = (await self.db.execute(query)).scalars().all()

        resolved_today = resolve_today(today)
        members_response = []
        for m in members:
            open_sessions = [s for s in m.meeting_sessions if s.ended_at is None]
            members_response.append(
                TeamMemberSummary(
                    id=m.id,
                    team_id=m.team_id,
                    name=m.name,
                    role=m.role,
                    has_active_session=one_or_none(open_sessions) is not None,
                    open_item_count=sum(1 for i in m.agenda_items if not i.completed),
                    relevant_item_count=sum(
                        1 for i in m.agenda_items if is_relevant_now_open(i, resolved_today)
                    ),
                    created_at=m.created_at,
                )
            )

        return TeamWithMembersResponse(
            id=team.id,
            name=team.name,
            owner_user_id=team.owner_user_id,
            created_at=team.created_at,
            updated_at=team.updated_at,
            members=members_response,
        )

    async def update_team(
        self, team_id: UUID, data: UpdateTeamRequest, user_id: UUID
    ) -> TeamResponse:
        """팀 이름 변경"""
        team = await self._get_owned_team(team_id, user_id)

        name = data.name.strip()
        if not name:
            raise ValidationError("NAME_REQUIRED")

        team.name = name
        await self.db.flush()
        await self.db.refresh(team)

        return TeamResponse.model_validate(team)

    async def delete_team(self, team_id: UUID, user_id: UUID) -> None:
        """팀 삭제 (팀원, 아젠다, 세션까지 함께 삭제)"""
        team = await self._get_owned_team(team_id, user_id)

        await self.db.delete(team)
        await self.db.flush()
