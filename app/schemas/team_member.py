from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CreateTeamMemberRequest(BaseModel):
    """팀원 추가 요청"""

    name: str = Field(min_length=1, max_length=100)


class UpdateTeamMemberRequest(BaseModel):
    """팀원 이름 수정 요청"""

    name: str = Field(min_length=1, max_length=100)


class MemberProfile(BaseModel):
    """팀원 프로필 (AI 추출 결과와 동일한 필드)"""

    role: str | None = None
    current_focus: str | None = None
    growth_goals: str | None = None
    one_on_one_themes: str | None = None
    feedback_preferences: str | None = None


class UpdateMemberProfileRequest(MemberProfile):
    """팀원 프로필 저장 요청"""

    profile_raw_input: str | None = Field(default=None, alias="profileRawInput")

    class Config:
        populate_by_name = True


class TeamMemberResponse(BaseModel):
    """팀원 응답"""

    id: UUID
    team_id: UUID = Field(serialization_alias="teamId")
    name: str
    role: str | None = None
    current_focus: str | None = Field(default=None, serialization_alias="currentFocus")
    growth_goals: str | None = Field(default=None, serialization_alias="growthGoals")
    one_on_one_themes: str | None = Field(
        default=None, serialization_alias="oneOnOneThemes"
    )
    feedback_preferences: str | None = Field(
        default=None, serialization_alias="feedbackPreferences"
    )
    profile_raw_input: str | None = Field(
        default=None, serialization_alias="profileRawInput"
    )
    has_profile: bool = Field(default=False, serialization_alias="hasProfile")
    has_active_session: bool = Field(default=False, serialization_alias="hasActiveSession")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    class Config:
        populate_by_name = True
        from_attributes = True
