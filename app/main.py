import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.middleware import REFRESHED_TOKEN_HEADER, TokenRefreshMiddleware
from app.api.v1.endpoints import profile
from app.api.v1.router import api_router
from app.core.config import get_settings
from app.core.database import create_tables, engine
from app.core.telemetry import instrument_fastapi, instrument_sqlalchemy, setup_telemetry

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """애플리케이션 라이프사이클"""
    # 시작 시: Telemetry 초기화
    if settings.telemetry_enabled:
        setup_telemetry("oneonone-backend", "0.1.0")
        instrument_sqlalchemy(engine)

    if settings.auto_create_tables:
        await create_tables()
        logger.info("Database tables created")

    yield
    # 종료 시
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="One-on-One - 매니저용 1:1 미팅 아젠다 관리 API",
    lifespan=lifespan,
)

# OpenTelemetry FastAPI 계측
if settings.telemetry_enabled:
    instrument_fastapi(app)

# 만료 임박 토큰 자동 갱신
app.add_middleware(TokenRefreshMiddleware)

# CORS 설정 (갱신 토큰 헤더를 클라이언트에 노출)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[REFRESHED_TOKEN_HEADER],
)

# API 라우터 등록
app.include_router(api_router)
app.include_router(profile.router)


@app.get("/health")
async def health_check() -> dict:
    """헬스 체크"""
    return {"status": "ok"}
