import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

# 프로필 필드 (AI 추출 및 수동 편집 대상)
PROFILE_FIELDS = (
    "role",
    "current_focus",
    "growth_goals",
    "one_on_one_themes",
    "feedback_preferences",
)


class Team(Base):
    """팀 모델 (한 명의 사용자가 소유)"""

    __tablename__ = "teams"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    owner_user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
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
    owner: Mapped["User"] = relationship("User", back_populates="teams")
    members: Mapped[list["TeamMember"]] = relationship(
        "TeamMember",
        back_populates="team",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Team {self.name}>"


class TeamMember(Base):
    """팀원 모델 (1:1 미팅 대상, 계정 없음)"""

    __tablename__ = "team_members"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    team_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("teams.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )

    # 프로필
    role: Mapped[str | None] = mapped_column(Text, nullable=True)
    current_focus: Mapped[str | None] = mapped_column(Text, nullable=True)
    growth_goals: Mapped[str | None] = mapped_column(Text, nullable=True)
    one_on_one_themes: Mapped[str | None] = mapped_column(Text, nullable=True)
    feedback_preferences: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_raw_input: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,  # 추출에 사용한 매니저 원문 메모
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
    team: Mapped["Team"] = relationship("Team", back_populates="members")
    agenda_items: Mapped[list["AgendaItem"]] = relationship(
        "AgendaItem",
        back_populates="team_member",
        cascade="all, delete-orphan",
    )
    meeting_sessions: Mapped[list["MeetingSession"]] = relationship(
        "MeetingSession",
        back_populates="team_member",
        cascade="all, delete-orphan",
    )

    @property
    def has_profile(self) -> bool:
        return any(getattr(self, field) for field in PROFILE_FIELDS)

    def __repr__(self) -> str:
        return f"<TeamMember {self.name} in {self.team_id}>"


# 순환 import 방지
from app.models.agenda import AgendaItem  # noqa: E402
from app.models.meeting_session import MeetingSession  # noqa: E402
from app.models.user import User  # noqa: E402
