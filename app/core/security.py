from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from app.core.config import get_settings

settings = get_settings()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """비밀번호 검증"""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8")
    )


def get_password_hash(password: str) -> str:
    """비밀번호 해싱"""
    return bcrypt.hashpw(
        password.encode("utf-8"),
        bcrypt.gensalt()
    ).decode("utf-8")


def create_access_token(subject: str) -> str:
    """Access token 생성"""
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.access_token_expire_minutes
    )
    to_encode = {"sub": subject, "exp": expire, "type": "access"}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_refresh_token(subject: str) -> str:
    """Refresh token 생성"""
    expire = datetime.now(timezone.utc) + timedelta(days=settings.refresh_token_expire_days)
    to_encode = {"sub": subject, "exp": expire, "type": "refresh"}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict | None:
    """토큰 디코딩 (검증 포함)"""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
        return payload
    except JWTError:
        return None


def seconds_until_expiry(payload: dict, now: datetime | None = None) -> int | None:
    """토큰 만료까지 남은 시간 (exp 클레임이 없으면 None)"""
    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        return None
    now = now or datetime.now(timezone.utc)
    return int(exp - now.timestamp())


def should_refresh_access_token(token: str, threshold_seconds: int | None = None) -> bool:
    """유효한 access token이 곧 만료되는지 확인

    검증에 실패한 토큰은 갱신 대상이 아님 (인증 의존성에서 401 처리)
    """
    payload = decode_token(token)
    if not payload or payload.get("type") != "access" or not payload.get("sub"):
        return False

    remaining = seconds_until_expiry(payload)
    if remaining is None:
        return True

    threshold = (
        settings.token_refresh_threshold_seconds
        if threshold_seconds is None
        else threshold_seconds
    )
    return remaining < threshold


def create_tokens(user_id: str) -> dict:
    """Access token과 Refresh token 쌍 생성"""
    return {
        "access_token": create_access_token(user_id),
        "refresh_token": create_refresh_token(user_id),
        "token_type": "Bearer",
        "expires_in": settings.access_token_expire_minutes * 60,
    }
