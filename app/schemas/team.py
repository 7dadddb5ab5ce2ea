from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.schemas.common import PaginationMeta


class CreateTeamRequest(BaseModel):
    """팀 생성 요청"""

    name: str = Field(min_length=1, max_length=100)


class UpdateTeamRequest(BaseModel):
    """팀 수정 요청 (이름 변경)"""

    name: str = Field(min_length=1, max_length=100)


class TeamResponse(BaseModel):
    """팀 응답"""

    id: UUID
    name: str
    owner_user_id: UUID = Field(serialization_alias="ownerUserId")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    class Config:
        populate_by_name = True
        from_attributes = True


class TeamMemberSummary(BaseModel):
    """팀 상세 화면의 팀원 카드"""

    id: UUID
    team_id: UUID = Field(serialization_alias="teamId")
    name: str
    role: str | None = None
    has_active_session: bool = Field(serialization_alias="hasActiveSession")
    open_item_count: int = Field(serialization_alias="openItemCount")
    relevant_item_count: int = Field(serialization_alias="relevantItemCount")
    created_at: datetime = Field(serialization_alias="createdAt")

    class Config:
        populate_by_name = True


class TeamWithMembersResponse(BaseModel):
    """팀 상세 응답 (팀원 포함)"""

    id: UUID
    name: str
    owner_user_id: UUID = Field(serialization_alias="ownerUserId")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")
    members: list[TeamMemberSummary]

    class Config:
        populate_by_name = True


class TeamListResponse(BaseModel):
    """팀 목록 응답"""

    items: list[TeamResponse]
    meta: PaginationMeta
