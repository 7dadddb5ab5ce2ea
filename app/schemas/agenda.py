from datetime import date, datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field


class AgendaScope(str, Enum):
    """아젠다 목록 필터"""

    ALL = "all"
    RELEVANT = "relevant"  # 미완료 + (날짜 없음 또는 오늘 이전)
    FUTURE = "future"  # 미완료 + 미래 날짜
    COMPLETED = "completed"


class CreateAgendaItemRequest(BaseModel):
    """아젠다 생성 요청"""

    content: str = Field(min_length=1, max_length=2000)
    scheduled_date: date | None = Field(default=None, alias="scheduledDate")

    class Config:
        populate_by_name = True


class UpdateAgendaItemRequest(BaseModel):
    """아젠다 수정 요청

    scheduledDate를 명시적으로 null로 보내면 예정일이 해제됩니다.
    """

    content: str | None = Field(default=None, min_length=1, max_length=2000)
    completed: bool | None = None
    scheduled_date: date | None = Field(default=None, alias="scheduledDate")

    class Config:
        populate_by_name = True


class AgendaItemResponse(BaseModel):
    """아젠다 응답"""

    id: UUID
    team_member_id: UUID = Field(serialization_alias="teamMemberId")
    content: str
    completed: bool
    scheduled_date: date | None = Field(serialization_alias="scheduledDate")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    class Config:
        populate_by_name = True
        from_attributes = True
