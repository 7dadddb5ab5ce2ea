"""인증 서비스 단위 테스트

- register: 성공, 이메일 중복, 비밀번호 해싱
- login: 성공, 잘못된 이메일, 잘못된 비밀번호, 토큰 생성, 이메일 대소문자
- get_user_by_email / get_user_by_id
- refresh_token: 성공, 유효하지 않은 토큰, access token 거부
- get_current_user: 성공, 유효하지 않은 토큰
"""

from uuid import uuid4

import pytest
from sqlalchemy import select

from app.core.security import create_tokens, decode_token, verify_password
from app.models.user import User
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services.auth_service import AuthService


# ===== register 테스트 =====


@pytest.mark.asyncio
async def test_register_success(db_session):
    """회원가입 성공 테스트"""
    auth_service = AuthService(db_session)

    register_data = RegisterRequest(
        email="new_user@example.com",
        password="test_password123",
        name="신규 사용자",
    )

    result = await auth_service.register(register_data)

    # 사용자 정보 검증
    assert result.user.email == register_data.email
    assert result.user.name == register_data.name

    # 토큰 생성 검증
    assert result.tokens.access_token is not None
    assert result.tokens.refresh_token is not None
    assert result.tokens.token_type == "Bearer"


@pytest.mark.asyncio
async def test_register_duplicate_email(db_session, test_user: User):
    """이메일 중복 시 회원가입 실패"""
    auth_service = AuthService(db_session)

    register_data = RegisterRequest(
        email=test_user.email,  # 이미 존재하는 이메일
        password="test_password123",
        name="중복 사용자",
    )

    with pytest.raises(ValueError, match="EMAIL_EXISTS"):
        await auth_service.register(register_data)


@pytest.mark.asyncio
async def test_register_password_hashed(db_session):
    """비밀번호가 해싱되어 저장되는지 확인"""
    auth_service = AuthService(db_session)

    plain_password = "plain_password_123"
    register_data = RegisterRequest(
        email="hash_test@example.com",
        password=plain_password,
        name="해싱 테스트 사용자",
    )

    await auth_service.register(register_data)

    saved_user = (
        await db_session.execute(select(User).where(User.email == register_data.email))
    ).scalar_one_or_none()

    assert saved_user.hashed_password != plain_password
    assert verify_password(plain_password, saved_user.hashed_password) is True


# ===== login 테스트 =====


@pytest.mark.asyncio
async def test_login_success(db_session, test_user: User):
    """로그인 성공 테스트"""
    auth_service = AuthService(db_session)

    result = await auth_service.login(
        LoginRequest(email=test_user.email, password="test_password123")
    )

    assert result.user.id == test_user.id
    assert result.tokens.access_token is not None


@pytest.mark.asyncio
async def test_login_invalid_email(db_session):
    """존재하지 않는 이메일로 로그인 시도"""
    auth_service = AuthService(db_session)

    with pytest.raises(ValueError, match="INVALID_CREDENTIALS"):
        await auth_service.login(
            LoginRequest(email="nonexistent@example.com", password="any_password")
        )


@pytest.mark.asyncio
async def test_login_invalid_password(db_session, test_user: User):
    """잘못된 비밀번호로 로그인 시도"""
    auth_service = AuthService(db_session)

    with pytest.raises(ValueError, match="INVALID_CREDENTIALS"):
        await auth_service.login(LoginRequest(email=test_user.email, password="wrong_password"))


@pytest.mark.asyncio
async def test_login_generates_valid_tokens(db_session, test_user: User):
    """로그인 시 유효한 토큰 생성 확인"""
    auth_service = AuthService(db_session)

    login_result = await auth_service.login(
        LoginRequest(email=test_user.email, password="test_password123")
    )

    access_payload = decode_token(login_result.tokens.access_token)
    assert access_payload.get("type") == "access"
    assert access_payload.get("sub") == str(test_user.id)

    refresh_payload = decode_token(login_result.tokens.refresh_token)
    assert refresh_payload.get("type") == "refresh"
    assert refresh_payload.get("sub") == str(test_user.id)


# ===== get_user_by_email / get_user_by_id =====


@pytest.mark.asyncio
async def test_get_user_by_email_not_found(db_session):
    """존재하지 않는 이메일 조회 시 None 반환"""
    auth_service = AuthService(db_session)

    assert await auth_service.get_user_by_email("nonexistent@example.com") is None


@pytest.mark.asyncio
async def test_get_user_by_id_success(db_session, test_user: User):
    """ID(문자열)로 사용자 조회 성공"""
    auth_service = AuthService(db_session)

    found_user = await auth_service.get_user_by_id(str(test_user.id))

    assert found_user is not None
    assert found_user.id == test_user.id


@pytest.mark.asyncio
async def test_get_user_by_id_invalid_format(db_session):
    """UUID 형식이 아니면 None"""
    auth_service = AuthService(db_session)

    assert await auth_service.get_user_by_id("not-a-uuid") is None
    assert await auth_service.get_user_by_id(str(uuid4())) is None


# ===== refresh_token 테스트 =====


@pytest.mark.asyncio
async def test_refresh_token_success(db_session, test_user: User):
    """토큰 갱신 성공"""
    auth_service = AuthService(db_session)

    tokens = create_tokens(str(test_user.id))
    new_tokens = await auth_service.refresh_token(tokens["refresh_token"])

    new_payload = decode_token(new_tokens.access_token)
    assert new_payload.get("sub") == str(test_user.id)
    assert new_payload.get("type") == "access"


@pytest.mark.asyncio
async def test_refresh_token_invalid(db_session):
    """유효하지 않은 refresh_token으로 갱신 시도"""
    auth_service = AuthService(db_session)

    with pytest.raises(ValueError, match="INVALID_TOKEN"):
        await auth_service.refresh_token("invalid.token.here")


@pytest.mark.asyncio
async def test_refresh_token_rejects_access_token(db_session, test_user: User):
    """access token으로는 갱신 불가"""
    auth_service = AuthService(db_session)

    tokens = create_tokens(str(test_user.id))

    with pytest.raises(ValueError, match="INVALID_TOKEN"):
        await auth_service.refresh_token(tokens["access_token"])


# ===== get_current_user 테스트 =====


@pytest.mark.asyncio
async def test_get_current_user_success(db_session, test_user: User):
    """현재 사용자 조회 성공"""
    auth_service = AuthService(db_session)

    tokens = create_tokens(str(test_user.id))
    current_user = await auth_service.get_current_user(tokens["access_token"])

    assert current_user.id == test_user.id


@pytest.mark.asyncio
async def test_get_current_user_invalid_token(db_session):
    """유효하지 않은 access_token으로 조회 시도"""
    auth_service = AuthService(db_session)

    with pytest.raises(ValueError, match="INVALID_TOKEN"):
        await auth_service.get_current_user("invalid.access.token")


@pytest.mark.asyncio
async def test_login_email_case_insensitive(db_session, test_user: User):
    """이메일 대소문자는 무시"""
    auth_service = AuthService(db_session)

    result = await auth_service.login(
        LoginRequest(email="TEST@Example.com", password="test_password123")
    )

    assert result.user.id == test_user.id


@pytest.mark.asyncio
async def test_register_duplicate_email_different_case(db_session, test_user: User):
    """대소문자만 다른 이메일도 중복"""
    auth_service = AuthService(db_session)

    with pytest.raises(ValueError, match="EMAIL_EXISTS"):
        await auth_service.register(
            RegisterRequest(email="Test@Example.COM", password="test_password123", name="중복")
        )
