"""OpenTelemetry 계측 설정

애플리케이션 시작 시 setup_telemetry()로 초기화하며,
초기화 전에는 noop tracer/meter를 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.semconv.resource import ResourceAttributes

from app.core.config import get_settings

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


def init_telemetry(
    service_name: str,
    service_version: str = "0.1.0",
    otlp_endpoint: str | None = None,
) -> tuple[trace.Tracer, metrics.Meter]:
    """OpenTelemetry 초기화

    Args:
        service_name: 서비스 이름 (예: "oneonone-backend")
        service_version: 서비스 버전
        otlp_endpoint: OTLP 수신 엔드포인트 (기본값: 설정의 otlp_endpoint)

    Returns:
        (Tracer, Meter) 튜플
    """
    settings = get_settings()
    endpoint = otlp_endpoint or settings.otlp_endpoint

    resource = Resource.create(
        {
            ResourceAttributes.SERVICE_NAME: service_name,
            ResourceAttributes.SERVICE_VERSION: service_version,
            ResourceAttributes.DEPLOYMENT_ENVIRONMENT: settings.app_env,
        }
    )

    tracer_provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(tracer_provider)

    metric_reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=endpoint, insecure=True),
        export_interval_millis=10000,  # 10초마다 export
    )
    meter_provider = MeterProvider(resource=resource, metric_readers=[metric_reader])
    metrics.set_meter_provider(meter_provider)

    tracer = trace.get_tracer(service_name, service_version)
    meter = metrics.get_meter(service_name, service_version)

    logger.info(
        "Telemetry initialized: service=%s, endpoint=%s",
        service_name,
        endpoint,
    )

    return tracer, meter


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI 자동 계측"""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI instrumentation enabled")
    except Exception as e:
        logger.warning("Failed to instrument FastAPI: %s", e)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """SQLAlchemy 자동 계측"""
    try:
        from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor

        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
        logger.info("SQLAlchemy instrumentation enabled")
    except Exception as e:
        logger.warning("Failed to instrument SQLAlchemy: %s", e)


class OneOnOneMetrics:
    """1:1 미팅 도메인 메트릭"""

    def __init__(self, meter: metrics.Meter):
        self.meter = meter
        self.meeting_sessions_started = self.meter.create_counter(
            name="oneonone_meeting_sessions_started_total",
            description="시작된 미팅 세션 수",
        )
        self.meeting_sessions_ended = self.meter.create_counter(
            name="oneonone_meeting_sessions_ended_total",
            description="종료된 미팅 세션 수",
        )
        self.snapshot_size = self.meter.create_histogram(
            name="oneonone_meeting_snapshot_items",
            description="세션 시작 시 스냅샷된 아젠다 수",
        )
        self.profile_extractions = self.meter.create_counter(
            name="oneonone_profile_extractions_total",
            description="프로필 추출 호출 수 (result=success/failed)",
        )
        self.profile_extraction_duration = self.meter.create_histogram(
            name="oneonone_profile_extraction_duration_seconds",
            description="프로필 추출 외부 API 호출 시간",
            unit="s",
        )


# ===========================================
# 싱글톤 인스턴스 및 접근자
# ===========================================

_tracer: trace.Tracer | None = None
_meter: metrics.Meter | None = None
_metrics: OneOnOneMetrics | None = None
_initialized: bool = False


def get_tracer() -> trace.Tracer:
    """Tracer 인스턴스 반환 (초기화 안 된 경우 noop tracer 반환)"""
    if _tracer is None:
        return trace.get_tracer("oneonone-noop")
    return _tracer


def get_metrics() -> OneOnOneMetrics:
    """도메인 메트릭 반환 (초기화 안 된 경우 noop meter 기반)"""
    global _metrics
    if _metrics is None:
        _metrics = OneOnOneMetrics(_meter or metrics.get_meter("oneonone-noop"))
    return _metrics


def setup_telemetry(service_name: str, service_version: str = "0.1.0") -> None:
    """전역 telemetry 설정 (애플리케이션 시작 시 호출)"""
    global _tracer, _meter, _metrics, _initialized

    if _initialized:
        return

    _tracer, _meter = init_telemetry(service_name, service_version)
    _metrics = OneOnOneMetrics(_meter)
    _initialized = True
