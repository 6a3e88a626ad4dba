"""Admin password check and the FastAPI dependency guarding admin routes."""

import hmac

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from boloflix.auth.jwt import ADMIN_SUBJECT, ADMIN_TOKEN_TYPE, decode_token
from boloflix.config import Settings, get_settings

# Strict bearer, raises 403 automatically if no token provided
_bearer_scheme = HTTPBearer()


def verify_admin_password(settings: Settings, password: str) -> bool:
    """Constant-time comparison against the configured admin password.

    Always False when no admin password is configured.
    """
    if not settings.admin_password:
        return False
    return hmac.compare_digest(password.encode("utf-8"), settings.admin_password.encode("utf-8"))


async def require_admin(
    credentials: HTTPAuthorizationCredentials = Depends(_bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """Validate the admin Bearer token and return its subject.

    Raises:
        HTTPException 401: If the token is invalid, expired, or not an admin token.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = decode_token(settings, credentials.credentials)
    except JWTError:
        raise credentials_exception from None

    if payload.get("type") != ADMIN_TOKEN_TYPE or payload.get("sub") != ADMIN_SUBJECT:
        raise credentials_exception

    return payload["sub"]
