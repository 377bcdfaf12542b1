"""
app/core/security.py

Purpose: Bearer token minting and verification

- Signs tokens with SECRET_KEY (HS256 by default)
- Fixed 24-hour validity window (TOKEN_TTL_SECONDS)
- Rejects tampered, malformed and expired tokens
"""

import jwt

from app.core.config import settings
from app.core.exceptions import AuthenticationError
from app.models.auth import AuthToken, TokenClaims
from app.models.user import User
from utils.constants import INVALID_TOKEN_MESSAGE, TOKEN_TTL_SECONDS, TOKEN_TYPE
from utils.time_utils import expires_at, utc_now


def create_access_token(user: User) -> AuthToken:
    """
    Mints a signed bearer token for the user.

    Args:
        user: Authenticated user

    Returns:
        AuthToken with absolute and relative expiry
    """
    issued_at = utc_now()
    expiry = expires_at(TOKEN_TTL_SECONDS, issued_at)

    payload = {
        "sub": user.id,
        "user_id": user.id,
        "phone_number": user.phone_number,
        "iat": int(issued_at.timestamp()),
        "exp": int(expiry.timestamp()),
    }
    access_token = jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    return AuthToken(
        access_token=access_token,
        token_type=TOKEN_TYPE,
        expires_in=TOKEN_TTL_SECONDS,
        expires_at=expiry,
    )


def decode_access_token(token: str) -> TokenClaims:
    """
    Verifies a bearer token and returns its claims.

    Raises:
        AuthenticationError: If the signature, format or expiry is invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(INVALID_TOKEN_MESSAGE) from e

    try:
        return TokenClaims(
            user_id=payload["user_id"],
            phone_number=payload["phone_number"],
            exp=payload["exp"],
        )
    except KeyError as e:
        raise AuthenticationError(INVALID_TOKEN_MESSAGE) from e
