"""OpenAI 기반 팀원 프로필 추출 서비스

매니저의 자유 형식 메모를 고정 시스템 프롬프트와 함께 전달하고,
JSON 응답을 5개 프로필 필드로 매핑합니다. 재시도는 하지 않습니다.
"""

import json
import logging
import time
from typing import Any

from openai import AsyncOpenAI, OpenAIError

from app.core.config import get_settings
from app.core.exceptions import ExternalServiceError, ValidationError
from app.core.telemetry import get_metrics, get_tracer
from app.models.team import PROFILE_FIELDS
from app.prompts.v1.profile import PROFILE_EXTRACTION_SYSTEM_PROMPT
from app.schemas.profile import ExtractedProfile

logger = logging.getLogger(__name__)


def _coerce_field(value: Any) -> str | None:
    """모델 응답 값을 문자열 또는 None으로 정규화"""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, list):
        parts = [_coerce_field(v) for v in value]
        return "; ".join(part for part in parts if part) or None
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False) if value else None
    return str(value)


def parse_profile_content(content: str) -> ExtractedProfile:
    """completion 본문(JSON)을 ExtractedProfile로 변환

    Raises:
        ExternalServiceError: JSON이 아니거나 객체가 아닌 경우
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ExternalServiceError("MALFORMED_COMPLETION") from e

    if not isinstance(data, dict):
        raise ExternalServiceError("MALFORMED_COMPLETION")

    return ExtractedProfile(**{field: _coerce_field(data.get(field)) for field in PROFILE_FIELDS})


class ProfileExtractionService:
    """프로필 추출 서비스

    AsyncOpenAI 클라이언트는 최초 호출 시 한 번만 생성되어 재사용됩니다.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float | None = None,
        client: AsyncOpenAI | None = None,
    ):
        settings = get_settings()
        self._api_key = api_key or settings.openai_api_key
        self.model = model or settings.profile_extraction_model
        self.temperature = (
            settings.profile_extraction_temperature if temperature is None else temperature
        )
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        """AsyncOpenAI 클라이언트 (lazy initialization)"""
        if self._client is None:
            if not self._api_key:
                raise ExternalServiceError("OPENAI_NOT_CONFIGURED")
            self._client = AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def extract(self, text: str) -> ExtractedProfile:
        """메모에서 프로필 추출

        Raises:
            ValidationError: 텍스트가 비어 있는 경우
            ExternalServiceError: 클라이언트 미설정, API 호출 실패 또는 응답 파싱 실패
        """
        if not text or not text.strip():
            raise ValidationError("TEXT_REQUIRED")

        metrics = get_metrics()
        with get_tracer().start_as_current_span("profile_extraction") as span:
            span.set_attribute("llm.model", self.model)
            try:
                profile = await self._request_profile(text)
            except ExternalServiceError as e:
                metrics.profile_extractions.add(1, {"result": "failed", "code": e.code})
                span.set_attribute("error.code", e.code)
                raise

        metrics.profile_extractions.add(1, {"result": "success"})
        logger.info(
            "Profile extracted: model=%s, fields=%d",
            self.model,
            sum(1 for field in PROFILE_FIELDS if getattr(profile, field)),
        )
        return profile

    async def _request_profile(self, text: str) -> ExtractedProfile:
        client = self.client

        started = time.perf_counter()
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": PROFILE_EXTRACTION_SYSTEM_PROMPT},
                    {"role": "user", "content": text},
                ],
                response_format={"type": "json_object"},
                temperature=self.temperature,
            )
        except OpenAIError as e:
            logger.error("Profile extraction request failed: %s", e)
            raise ExternalServiceError("PROFILE_EXTRACTION_FAILED") from e
        finally:
            get_metrics().profile_extraction_duration.record(time.perf_counter() - started)

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            logger.error("Profile extraction returned empty content: model=%s", self.model)
            raise ExternalServiceError("EMPTY_COMPLETION")

        try:
            return parse_profile_content(content)
        except ExternalServiceError:
            logger.error("Profile extraction returned malformed JSON: %s", content[:200])
            raise
