"""Prompts v1 패키지

Version 1.0 프롬프트 모음.

패키지 구조:
    - profile/: 팀원 프로필 추출 프롬프트

사용 예시:
    from app.prompts.v1.profile import PROFILE_EXTRACTION_SYSTEM_PROMPT
"""

from . import profile

__all__ = ["profile"]
