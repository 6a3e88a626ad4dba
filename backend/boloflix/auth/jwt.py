"""JWT creation and verification for admin access tokens."""

from datetime import datetime, timedelta, timezone

from jose import jwt

from boloflix.config import Settings

ADMIN_SUBJECT = "admin"
ADMIN_TOKEN_TYPE = "admin"


def create_admin_token(settings: Settings, expires_delta: timedelta | None = None) -> str:
    """Create a short-lived admin access token.

    Args:
        settings: Provides the signing key, algorithm and default lifetime.
        expires_delta: Custom expiration duration. Defaults to
            ``settings.admin_token_expire_minutes`` minutes.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.admin_token_expire_minutes))
    payload = {"sub": ADMIN_SUBJECT, "type": ADMIN_TOKEN_TYPE, "iat": now, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(settings: Settings, token: str) -> dict:
    """Decode and verify a JWT token.

    Raises:
        jose.JWTError: If the token is invalid, expired, or malformed.
    """
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
