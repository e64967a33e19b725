from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
from jose import JWTError, jwt

from interview_scheduler.core.config import settings

logger = logging.getLogger(__name__)

# bcrypt ignores everything past 72 bytes
_BCRYPT_MAX_BYTES = 72


def _encode_password(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def create_token(subject: str | Any, expires_delta: timedelta, token_type: str) -> str:
    issued_at = datetime.now(timezone.utc)
    claims: Dict[str, Any] = {
        "sub": str(subject),
        "type": token_type,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(subject: str | Any) -> str:
    return create_token(
        subject, timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES), "access"
    )


def create_refresh_token(subject: str | Any) -> str:
    return create_token(
        subject, timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS), "refresh"
    )


def verify_token(token: str, token_type: str = "access") -> dict[str, Any]:
    """Decode a token and check its type; any failure surfaces as ValueError."""
    try:
        claims = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError as exc:
        raise ValueError("Invalid token") from exc
    if claims.get("type") != token_type:
        raise ValueError(f"Expected a {token_type} token")
    return claims


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(
            _encode_password(plain_password), hashed_password.encode("utf-8")
        )
    except ValueError as exc:
        # Malformed stored hash
        logger.error(f"Password verification error: {exc}")
        return False


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(_encode_password(password), bcrypt.gensalt(rounds=12)).decode(
        "utf-8"
    )
