import uuid
from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base


class AgendaItem(Base):
    """아젠다 항목 모델"""

    __tablename__ = "agenda_items"

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
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    completed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    scheduled_date: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,  # 없으면 항상 "지금 관련 있음"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # 관계
    team_member: Mapped["TeamMember"] = relationship(
        "TeamMember", back_populates="agenda_items"
    )
    session_links: Mapped[list["MeetingSessionAgendaItem"]] = relationship(
        "MeetingSessionAgendaItem",
        back_populates="agenda_item",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<AgendaItem {self.id} completed={self.completed}>"


# 순환 import 방지
from app.models.meeting_session import MeetingSessionAgendaItem  # noqa: E402
from app.models.team import TeamMember  # noqa: E402
