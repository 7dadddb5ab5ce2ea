import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class MeetingSession(Base):
    """1:1 미팅 세션 모델

    ended_at이 NULL이면 진행 중. 팀원당 진행 중 세션은 최대 1개이며
    부분 유니크 인덱스로 저장소 레벨에서 보장합니다.
    """

    __tablename__ = "meeting_sessions"
    __table_args__ = (
        Index(
            "uq_meeting_sessions_open_member",
            "team_member_id",
            unique=True,
            postgresql_where=text("ended_at IS NULL"),
            sqlite_where=text("ended_at IS NULL"),
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    team_member_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("team_members.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    started_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    ended_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    # 관계
    team_member: Mapped["TeamMember"] = relationship(
        "TeamMember", back_populates="meeting_sessions"
    )
    agenda_links: Mapped[list["MeetingSessionAgendaItem"]] = relationship(
        "MeetingSessionAgendaItem",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by=lambda: [
            MeetingSessionAgendaItem.added_at,
            MeetingSessionAgendaItem.position,
        ],
    )

    @property
    def is_active(self) -> bool:
        return self.ended_at is None

    def __repr__(self) -> str:
        return f"<MeetingSession {self.id} member={self.team_member_id}>"


class MeetingSessionAgendaItem(Base):
    """세션 스냅샷에 포함된 아젠다 (세션 종료 후에도 보존)"""

    __tablename__ = "meeting_session_agenda_items"

    session_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("meeting_sessions.id", ondelete="CASCADE"),
        primary_key=True,
    )
    agenda_item_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("agenda_items.id", ondelete="CASCADE"),
        primary_key=True,
    )
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    # 같은 added_at 사이의 삽입 순서
    position: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )

    # 관계
    session: Mapped["MeetingSession"] = relationship(
        "MeetingSession", back_populates="agenda_links"
    )
    agenda_item: Mapped["AgendaItem"] = relationship(
        "AgendaItem", back_populates="session_links"
    )

    def __repr__(self) -> str:
        return f"<MeetingSessionAgendaItem {self.session_id}:{self.agenda_item_id}>"


# 순환 import 방지
from app.models.agenda import AgendaItem  # noqa: E402
from app.models.team import TeamMember  # noqa: E402
