"""
Identity resolution for optional bearer tokens.

Endpoints accept anonymous requests, which run as the guest user. The
resolver keeps three outcomes apart:

- NoCredential: no Authorization header -> guest user
- ValidCredential: token verified -> its user id
- InvalidCredential: token present but unusable -> 401 on every endpoint

Verification uses python-jose with the configured secret/algorithm.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from alfa_trading.config import Settings, settings
from alfa_trading.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# Security scheme - auto_error=False allows optional auth
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class NoCredential:
    pass


@dataclass(frozen=True)
class ValidCredential:
    user_id: str


@dataclass(frozen=True)
class InvalidCredential:
    reason: str


IdentityResult = Union[NoCredential, ValidCredential, InvalidCredential]


def resolve_identity(token: Optional[str], app_settings: Optional[Settings] = None) -> IdentityResult:
    """Classify an optional raw bearer token."""
    cfg = app_settings or settings
    if token is None or not token.strip():
        return NoCredential()

    try:
        payload = jwt.decode(
            token.strip(),
            cfg.jwt_secret_key,
            algorithms=[cfg.jwt_algorithm],
        )
    except JWTError as e:
        return InvalidCredential(reason=str(e) or "Invalid token")

    user_id = payload.get("userId") or payload.get("sub")
    if not user_id:
        return InvalidCredential(reason="Token has no user id claim")
    return ValidCredential(user_id=str(user_id))


def create_access_token(
    user_id: str,
    expires_minutes: Optional[int] = None,
    app_settings: Optional[Settings] = None,
) -> str:
    """Issue a signed access token for a user id."""
    cfg = app_settings or settings
    minutes = expires_minutes if expires_minutes is not None else cfg.jwt_access_token_expire_minutes
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    payload = {
        "userId": str(user_id),
        "sub": str(user_id),
        "type": "access",
        "exp": expire,
    }
    return jwt.encode(payload, cfg.jwt_secret_key, algorithm=cfg.jwt_algorithm)


async def get_user_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Optional authentication - returns the caller's user id or the guest id.

    Usage:
        @router.get("/balance")
        async def balance(user_id: str = Depends(get_user_id)):
            ...
    """
    cfg = getattr(request.app.state, "settings", settings)
    result = resolve_identity(credentials.credentials if credentials else None, cfg)

    if isinstance(result, NoCredential):
        return cfg.guest_user_id
    if isinstance(result, ValidCredential):
        return result.user_id
    if isinstance(result, InvalidCredential):
        logger.warning(f"JWT decode error: {result.reason}")
        raise AuthenticationError("Invalid token")
    raise TypeError(f"Unhandled identity result: {result!r}")
