"""미팅 세션 서비스

세션 시작 시점에 "지금 관련 있는" 미완료 아젠다를 스냅샷으로 고정하고,
세션이 진행되는 동안에는 이후 수정과 무관하게 그 목록을 유지합니다.
세션 중 새로 추가된 아젠다만 스냅샷 뒤에 덧붙습니다.
"""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.core.clock import resolve_today, utc_now
from app.core.exceptions import ConflictError, NotFoundError
from app.core.telemetry import get_metrics
from app.models.agenda import AgendaItem
from app.models.meeting_session import MeetingSession, MeetingSessionAgendaItem
from app.schemas.agenda import AgendaItemResponse
from app.schemas.meeting_session import (
    ActiveMeetingSessionResponse,
    MeetingSessionResponse,
    MeetingSessionSummary,
)
from app.services.ownership import OwnedResourceService
from app.utils.relations import one_or_none

logger = logging.getLogger(__name__)


def is_relevant_now_open(item: AgendaItem, today: date) -> bool:
    """미완료이면서 날짜가 없거나 오늘(로컬 날짜) 이전으로 예정된 아젠다인지"""
    if item.completed:
        return False
    if item.scheduled_date is None:
        return True
    return item.scheduled_date <= today


def is_future_open(item: AgendaItem, today: date) -> bool:
    """미완료이면서 오늘 이후로 예정된 아젠다인지"""
    if item.completed or item.scheduled_date is None:
        return False
    return item.scheduled_date > today


class MeetingSessionService(OwnedResourceService):
    """미팅 세션 서비스"""

    async def start_meeting_session(
        self,
        member_id: UUID,
        user_id: UUID,
        today: date | None = None,
    ) -> MeetingSessionResponse:
        """미팅 세션 시작 + 관련 아젠다 스냅샷

        Args:
            member_id: 팀원 ID
            user_id: 요청 사용자 ID
            today: 클라이언트 로컬 날짜 (없으면 서버 설정 타임존 기준)

        Raises:
            ConflictError: 이미 진행 중인 세션이 있는 경우
        """
        member = await self._get_owned_member(member_id, user_id)

        if await self._get_open_session(member.id):
            raise ConflictError("SESSION_ALREADY_OPEN")

        now = utc_now()
        session = MeetingSession(
            team_member_id=member.id,
            started_at=now,
            ended_at=None,
        )
        self.db.add(session)
        try:
            await self.db.flush()
        except IntegrityError:
            # 동시 시작 요청: 부분 유니크 인덱스가 두 번째 insert를 거부
            await self.db.rollback()
            logger.warning("Concurrent session start rejected: member=%s", member_id)
            raise ConflictError("SESSION_ALREADY_OPEN")

        resolved_today = resolve_today(today)
        query = (
            select(AgendaItem)
            .where(AgendaItem.team_member_id == member.id)
            .order_by(AgendaItem.created_at, AgendaItem.id)
        )
        items = (await self.db.execute(query)).scalars().all()
        relevant = [item for item in items if is_relevant_now_open(item, resolved_today)]

        for position, item in enumerate(relevant):
            self.db.add(
                MeetingSessionAgendaItem(
                    session_id=session.id,
                    agenda_item_id=item.id,
                    added_at=now,
                    position=position,
                )
            )
        await self.db.flush()

        metrics = get_metrics()
        metrics.meeting_sessions_started.add(1)
        metrics.snapshot_size.record(len(relevant))
        logger.info(
            "Meeting session started: member=%s, session=%s, snapshot=%d, today=%s",
            member.id,
            session.id,
            len(relevant),
            resolved_today,
        )

        return MeetingSessionResponse.model_validate(session)

    async def end_meeting_session(
        self, member_id: UUID, user_id: UUID
    ) -> MeetingSessionResponse:
        """진행 중 미팅 세션 종료 (스냅샷 링크는 기록으로 보존)

        Raises:
            NotFoundError: 진행 중인 세션이 없는 경우
        """
        member = await self._get_owned_member(member_id, user_id)

        session = await self._get_open_session(member.id)
        if not session:
            raise NotFoundError("NO_ACTIVE_SESSION")

        session.ended_at = utc_now()
        await self.db.flush()

        get_metrics().meeting_sessions_ended.add(1)
        logger.info("Meeting session ended: member=%s, session=%s", member.id, session.id)

        return MeetingSessionResponse.model_validate(session)

    async def get_active_session(
        self, member_id: UUID, user_id: UUID
    ) -> ActiveMeetingSessionResponse:
        """진행 중 세션과 스냅샷 아젠다 조회"""
        member = await self._get_owned_member(member_id, user_id)

        session = await self._get_open_session(member.id)
        if not session:
            raise NotFoundError("NO_ACTIVE_SESSION")

        return ActiveMeetingSessionResponse(
            session=MeetingSessionResponse.model_validate(session),
            agenda_items=await self._load_session_items(session.id),
        )

    async def get_active_session_agenda_items(
        self, member_id: UUID, user_id: UUID
    ) -> list[AgendaItemResponse]:
        """진행 중 세션의 아젠다 목록 (added_at 오름차순, 세션 없으면 빈 목록)"""
        member = await self._get_owned_member(member_id, user_id)

        session = await self._get_open_session(member.id)
        if not session:
            return []

        return await self._load_session_items(session.id)

    async def list_sessions(
        self, member_id: UUID, user_id: UUID
    ) -> list[MeetingSessionSummary]:
        """팀원의 세션 이력 (최신순)"""
        member = await self._get_owned_member(member_id, user_id)

        count_subquery = (
            select(
                MeetingSessionAgendaItem.session_id,
                func.count().label("item_count"),
            )
            .group_by(MeetingSessionAgendaItem.session_id)
            .subquery()
        )
        query = (
            select(MeetingSession, func.coalesce(count_subquery.c.item_count, 0))
            .outerjoin(count_subquery, count_subquery.c.session_id == MeetingSession.id)
            .where(MeetingSession.team_member_id == member.id)
            .order_by(MeetingSession.started_at.desc())
        )
        rows = (await self.db.execute(query)).all()

        return [
            MeetingSessionSummary(
                id=session.id,
                team_member_id=session.team_member_id,
                started_at=session.started_at,
                ended_at=session.ended_at,
                is_active=session.is_active,
                agenda_item_count=item_count,
            )
            for session, item_count in rows
        ]

    async def attach_to_active_session(self, member_id: UUID, item: AgendaItem) -> bool:
        """진행 중 세션이 있으면 아젠다를 스냅샷 끝에 추가

        관련성 조건과 무관하게 명시적으로 추가된 아젠다는 항상 포함됩니다.
        소유권 확인은 호출자(AgendaService)가 이미 수행한 상태여야 합니다.
        """
        session = await self._get_open_session(member_id)
        if not session:
            return False

        max_position = (
            await self.db.execute(
                select(func.max(MeetingSessionAgendaItem.position)).where(
                    MeetingSessionAgendaItem.session_id == session.id
                )
            )
        ).scalar()

        self.db.add(
            MeetingSessionAgendaItem(
                session_id=session.id,
                agenda_item_id=item.id,
                added_at=utc_now(),
                position=(max_position + 1) if max_position is not None else 0,
            )
        )
        await self.db.flush()

        logger.info("Agenda item attached to session: session=%s, item=%s", session.id, item.id)
        return True

    async def _get_open_session(self, member_id: UUID) -> MeetingSession | None:
        """진행 중 세션 조회 (여러 개면 가장 최근에 시작된 세션)"""
        query = (
            select(MeetingSession)
            .where(
                MeetingSession.team_member_id == member_id,
                MeetingSession.ended_at.is_(None),
            )
            .order_by(MeetingSession.started_at.desc())
            .limit(1)
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def _load_session_items(self, session_id: UUID) -> list[AgendaItemResponse]:
        """세션 스냅샷 아젠다 로드 (added_at, position 오름차순)"""
        query = (
            select(MeetingSessionAgendaItem, AgendaItem)
            .outerjoin(AgendaItem, MeetingSessionAgendaItem.agenda_item_id == AgendaItem.id)
            .where(MeetingSessionAgendaItem.session_id == session_id)
            .order_by(
                MeetingSessionAgendaItem.added_at,
                MeetingSessionAgendaItem.position,
            )
        )
        rows = (await self.db.execute(query)).all()

        items = [one_or_none(item) for _link, item in rows]
        return [AgendaItemResponse.model_validate(item) for item in items if item is not None]
