"""
Bearer tokens for blog authors.

A token names its user by id (``user_id``) and username (``sub``). It is
only ever an access token; there is no refresh flow, a client logs in again
once the token expires.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import JWTError, jwt

from bloglist.configs import settings
from bloglist.schemas.auth import TokenData

TOKEN_TYPE = "access"

# Claims python-jose must find before the signature check counts as a pass
REQUIRED_CLAIMS = {
    "require_exp": True,
    "require_iat": True,
    "require_sub": True,
    "require_jti": True,
    "require_iss": True,
    "require_aud": True,
}


def create_access_token(
    user_id: UUID,
    username: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Issue a signed token for a user.

    Args:
        user_id: User's UUID
        username: User's username
        expires_delta: Lifetime override (defaults to ``ACCESS_TOKEN_EXPIRE_MINUTES``)

    Returns:
        str: Encoded JWT
    """
    issued_at = datetime.now(UTC)
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": username,
        "user_id": str(user_id),
        "jti": str(uuid4()),
        "iat": issued_at,
        "exp": issued_at + lifetime,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": TOKEN_TYPE,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> TokenData | None:
    """
    Verify a token and extract its identity.

    Args:
        token: JWT token string

    Returns:
        TokenData | None: The identity, or None if the token is malformed,
        forged, expired, or not an access token
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options=REQUIRED_CLAIMS,
        )
    except JWTError:
        return None

    if payload.get("type") != TOKEN_TYPE:
        return None

    try:
        return TokenData(
            username=payload["sub"],
            user_id=UUID(payload.get("user_id", "")),
            jti=payload["jti"],
            token_type=TOKEN_TYPE,
        )
    except ValueError:
        return None
