"""pytest 설정 및 공유 fixture

테스트 인프라:
- 테스트 DB 세션 (기본: in-memory SQLite, TEST_DATABASE_URL로 PostgreSQL 지정 가능)
- FastAPI AsyncClient
- 테스트 데이터 fixture (사용자, 팀, 팀원, 아젠다)
"""

import os
from collections.abc import AsyncGenerator, Callable
from datetime import date, datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from app.core.config import Settings
from app.core.database import Base, get_db
from app.core.security import create_access_token, get_password_hash
from app.main import app
from app.models.agenda import AgendaItem
from app.models.team import Team, TeamMember
from app.models.user import User

TEST_PASSWORD = "test_password123"


# ===== 테스트 설정 =====


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """테스트용 설정

    환경변수 TEST_DATABASE_URL이 있으면 사용, 없으면 in-memory SQLite 사용
    """
    test_db_url = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")

    return Settings(
        app_env="test",
        debug=True,
        database_url=test_db_url,
        jwt_secret_key="test-secret-key",
        openai_api_key="",
    )


# ===== 데이터베이스 Fixture =====


@pytest.fixture
async def test_engine(test_settings: Settings):
    """테스트용 비동기 엔진

    각 테스트마다 새 엔진 생성 (더 나은 테스트 격리)
    """
    if test_settings.database_url.startswith("sqlite"):
        # in-memory DB는 연결 하나를 공유해야 테이블이 유지됨
        engine = create_async_engine(
            test_settings.database_url,
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_async_engine(
            test_settings.database_url,
            echo=False,
            poolclass=NullPool,  # 테스트에서는 pool 사용 안 함
        )

    # 테이블 생성
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # 테이블 삭제
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """테스트용 DB 세션 (function scope)"""
    session_maker = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session


@pytest.fixture
def override_get_db(db_session: AsyncSession):
    """FastAPI 의존성 오버라이드용 DB fixture"""

    async def _override_get_db():
        yield db_session

    return _override_get_db


# ===== FastAPI Client Fixture =====


@pytest.fixture
async def async_client(override_get_db) -> AsyncGenerator[AsyncClient, None]:
    """비동기 FastAPI TestClient"""
    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# ===== 테스트 데이터 Fixture =====


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """테스트용 사용자 (매니저)"""
    user = User(
        id=uuid4(),
        email="test@example.com",
        name="테스트 사용자",
        hashed_password=get_password_hash(TEST_PASSWORD),
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def test_user2(db_session: AsyncSession) -> User:
    """두 번째 테스트용 사용자"""
    user = User(
        id=uuid4(),
        email="test2@example.com",
        name="테스트 사용자2",
        hashed_password=get_password_hash(TEST_PASSWORD),
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def test_team(db_session: AsyncSession, test_user: User) -> Team:
    """테스트용 팀 (소유자: test_user)"""
    team = Team(
        id=uuid4(),
        name="테스트 팀",
        owner_user_id=test_user.id,
    )
    db_session.add(team)
    await db_session.commit()
    await db_session.refresh(team)
    return team


@pytest.fixture
async def test_member(db_session: AsyncSession, test_team: Team) -> TeamMember:
    """테스트용 팀원 (test_team 소속)"""
    member = TeamMember(
        id=uuid4(),
        team_id=test_team.id,
        name="김팀원",
    )
    db_session.add(member)
    await db_session.commit()
    await db_session.refresh(member)
    return member


@pytest.fixture
def today() -> date:
    """테스트 기준 날짜 (고정)"""
    return date(2026, 3, 10)


@pytest.fixture
def make_agenda_item(
    db_session: AsyncSession, test_member: TeamMember
) -> Callable[..., Any]:
    """아젠다 생성 헬퍼

    created_at을 호출 순서대로 1초씩 증가시켜 정렬 결과를 고정합니다.
    """
    base_time = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)
    counter = {"n": 0}

    async def _make(
        content: str,
        scheduled_date: date | None = None,
        completed: bool = False,
        member: TeamMember | None = None,
    ) -> AgendaItem:
        counter["n"] += 1
        created_at = base_time + timedelta(seconds=counter["n"])
        item = AgendaItem(
            id=uuid4(),
            team_member_id=(member or test_member).id,
            content=content,
            scheduled_date=scheduled_date,
            completed=completed,
            created_at=created_at,
            updated_at=created_at,
        )
        db_session.add(item)
        await db_session.commit()
        await db_session.refresh(item)
        return item

    return _make


@pytest.fixture
def test_auth_token(test_user: User) -> str:
    """테스트용 JWT access token"""
    return create_access_token(str(test_user.id))


@pytest.fixture
def auth_headers(test_auth_token: str) -> dict[str, str]:
    """테스트용 인증 헤더"""
    return {"Authorization": f"Bearer {test_auth_token}"}


@pytest.fixture
def auth_headers2(test_user2: User) -> dict[str, str]:
    """다른 사용자(test_user2)의 인증 헤더"""
    return {"Authorization": f"Bearer {create_access_token(str(test_user2.id))}"}

