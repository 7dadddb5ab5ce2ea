from app.prompts.v1.profile.extraction import PROFILE_EXTRACTION_SYSTEM_PROMPT

__all__ = ["PROFILE_EXTRACTION_SYSTEM_PROMPT"]
