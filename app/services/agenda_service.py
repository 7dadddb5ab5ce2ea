import logging
from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.clock import resolve_today
from app.core.exceptions import ValidationError
from app.models.agenda import AgendaItem
from app.schemas.agenda import (
    AgendaItemResponse,
    AgendaScope,
    CreateAgendaItemRequest,
    UpdateAgendaItemRequest,
)
from app.services.meeting_session_service import (
    MeetingSessionService,
    is_future_open,
    is_relevant_now_open,
)
from app.services.ownership import OwnedResourceService

logger = logging.getLogger(__name__)


class AgendaService(OwnedResourceService):
    """아젠다 서비스"""

    def __init__(self, db: AsyncSession):
        super().__init__(db)
        self.meeting_sessions = MeetingSessionService(db)

    async def create_agenda_item(
        self,
        member_id: UUID,
        data: CreateAgendaItemRequest,
        user_id: UUID,
    ) -> AgendaItemResponse:
        """아젠다 생성 (진행 중 세션이 있으면 세션 목록에도 추가)"""
        member = await self._get_owned_member(member_id, user_id)

        content = data.content.strip()
        if not content:
            raise ValidationError("CONTENT_REQUIRED")

        item = AgendaItem(
            team_member_id=member.id,
            content=content,
            completed=False,
            scheduled_date=data.scheduled_date,
        )
        self.db.add(item)
        await self.db.flush()
        await self.db.refresh(item)

        attached = await self.meeting_sessions.attach_to_active_session(member.id, item)
        logger.debug("Agenda item created: item=%s, attached=%s", item.id, attached)

        return AgendaItemResponse.model_validate(item)

    async def list_agenda_items(
        self,
        member_id: UUID,
        user_id: UUID,
        scope: AgendaScope = AgendaScope.ALL,
        today: date | None = None,
    ) -> list[AgendaItemResponse]:
        """팀원 아젠다 목록 (최신순, scope 필터)"""
        member = await self._get_owned_member(member_id, user_id)

        query = (
            select(AgendaItem)
            .where(AgendaItem.team_member_id == member.id)
            .order_by(AgendaItem.created_at.desc(), AgendaItem.id)
        )
        items = (await self.db.execute(query)).scalars().all()

        resolved_today = resolve_today(today)
        if scope == AgendaScope.RELEVANT:
            items = [i for i in items if is_relevant_now_open(i, resolved_today)]
        elif scope == AgendaScope.FUTURE:
            items = [i for i in items if is_future_open(i, resolved_today)]
        elif scope == AgendaScope.COMPLETED:
            items = [i for i in items if i.completed]

        return [AgendaItemResponse.model_validate(i) for i in items]

    async def update_agenda_item(
        self,
        item_id: UUID,
        data: UpdateAgendaItemRequest,
        user_id: UUID,
    ) -> AgendaItemResponse:
        """아젠다 수정 (세션 스냅샷 링크는 변경하지 않음)"""
        item = await self._get_owned_agenda_item(item_id, user_id)

        if data.content is not None:
            content = data.content.strip()
            if not content:
                raise ValidationError("CONTENT_REQUIRED")
            item.content = content
        if data.completed is not None:
            item.completed = data.completed
        # 명시적으로 보낸 경우에만 반영 (null이면 예정일 해제)
        if "scheduled_date" in data.model_fields_set:
            item.scheduled_date = data.scheduled_date

        await self.db.flush()
        await self.db.refresh(item)

        return AgendaItemResponse.model_validate(item)

    async def toggle_agenda_item(self, item_id: UUID, user_id: UUID) -> AgendaItemResponse:
        """완료 여부 토글"""
        item = await self._get_owned_agenda_item(item_id, user_id)

        item.completed = not item.completed
        await self.db.flush()
        await self.db.refresh(item)

        return AgendaItemResponse.model_validate(item)

    async def delete_agenda_item(self, item_id: UUID, user_id: UUID) -> None:
        """아젠다 삭제 (세션 스냅샷에서도 함께 제거)"""
        item = await self._get_owned_agenda_item(item_id, user_id)

        await self.db.delete(item)
        await self.db.flush()
