"""Token creation and verification service."""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from company_manager.config import get_settings
from company_manager.domain.identity.entities.user_account import UserAccount

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
REFRESH_TOKEN_SECRET_KEY = settings.REFRESH_TOKEN_SECRET_KEY or SECRET_KEY
ALGORITHM = "HS256"
ISSUER = settings.JWT_ISSUER
AUDIENCE = settings.JWT_AUDIENCE
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES
REFRESH_TOKEN_EXPIRE_DAYS = settings.REFRESH_TOKEN_EXPIRE_DAYS
CLOCK_SKEW = timedelta(seconds=settings.JWT_CLOCK_SKEW_SECONDS)


class TokenPair(BaseModel):
    """DTO for token pair with access and refresh tokens."""

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int
    expires_at: datetime


class TokenClaims(BaseModel):
    """Claims read back from a verified token."""

    user_id: UUID
    user_name: str
    security_stamp: str
    permissions: list[str] = []


def create_access_token(account: UserAccount, permissions: Iterable[str]) -> tuple[str, datetime]:
    """Create an access token for an account, returning it with its expiry."""
    expire = datetime.now(UTC) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "sub": str(account.id.value),
        "name": account.user_name,
        "sstamp": account.security_stamp,
        "jti": uuid4().hex,
        "perm": sorted(permissions),
        "iss": ISSUER,
        "aud": AUDIENCE,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM), expire


def create_refresh_token(account: UserAccount) -> str:
    """Create a refresh token for an account."""
    expire = datetime.now(UTC) + timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)
    to_encode = {
        "sub": str(account.id.value),
        "name": account.user_name,
        "sstamp": account.security_stamp,
        "jti": uuid4().hex,
        "iss": ISSUER,
        "aud": AUDIENCE,
        "exp": expire,
        "type": "refresh",
    }
    return jwt.encode(to_encode, REFRESH_TOKEN_SECRET_KEY, algorithm=ALGORITHM)


def _decode(token: str, key: str, expected_type: str) -> TokenClaims | None:
    try:
        payload = jwt.decode(
            token,
            key,
            algorithms=[ALGORITHM],
            audience=AUDIENCE,
            issuer=ISSUER,
            leeway=CLOCK_SKEW,
        )
        if payload.get("type") != expected_type:
            return None
        user_id = payload.get("sub")
        stamp = payload.get("sstamp")
        if user_id is None or stamp is None:
            return None
        return TokenClaims(
            user_id=UUID(user_id),
            user_name=payload.get("name", ""),
            security_stamp=stamp,
            permissions=payload.get("perm", []),
        )
    except (InvalidTokenError, ValueError):
        return None


def verify_access_token(token: str) -> TokenClaims | None:
    """Verify an access token and return its claims if valid."""
    # Refresh tokens are rejected here; they are only good for issuing a new pair
    return _decode(token, SECRET_KEY, "access")


def verify_refresh_token(token: str) -> TokenClaims | None:
    """Verify a refresh token and return its claims if valid."""
    return _decode(token, REFRESH_TOKEN_SECRET_KEY, "refresh")


def create_token_pair(account: UserAccount, permissions: Iterable[str]) -> TokenPair:
    """Create a token pair (access + refresh) for an account."""
    access_token, expires_at = create_access_token(account, permissions)
    refresh_token = create_refresh_token(account)
    return TokenPair(
        access_token=access_token,
        refresh_token=refresh_token,
        token_type="bearer",  # noqa: S106
        expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        expires_at=expires_at,
    )
