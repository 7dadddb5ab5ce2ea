from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.agenda import AgendaItemResponse


class MeetingSessionResponse(BaseModel):
    """미팅 세션 응답"""

    id: UUID
    team_member_id: UUID = Field(serialization_alias="teamMemberId")
    started_at: datetime = Field(serialization_alias="startedAt")
    ended_at: datetime | None = Field(serialization_alias="endedAt")
    is_active: bool = Field(serialization_alias="isActive")

    class Config:
        populate_by_name = True
        from_attributes = True


class MeetingSessionSummary(MeetingSessionResponse):
    """세션 이력 항목"""

    agenda_item_count: int = Field(serialization_alias="agendaItemCount")


class ActiveMeetingSessionResponse(BaseModel):
    """진행 중 세션 + 스냅샷 아젠다"""

    session: MeetingSessionResponse
    agenda_items: list[AgendaItemResponse] = Field(serialization_alias="agendaItems")

    class Config:
        populate_by_name = True
