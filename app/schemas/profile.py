from pydantic import BaseModel


class ExtractedProfile(BaseModel):
    """프로필 추출 결과 (모든 필드는 문자열 또는 null)"""

    role: str | None = None
    current_focus: str | None = None
    growth_goals: str | None = None
    one_on_one_themes: str | None = None
    feedback_preferences: str | None = None


class ProfileExtractErrorResponse(BaseModel):
    """프로필 추출 에러 응답"""

    error: str
