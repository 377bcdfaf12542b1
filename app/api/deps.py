"""
app/api/deps.py

Purpose: FastAPI dependency wiring

- Builds the repository and services from process-wide clients
- Resolves the authenticated user from the bearer token and live session

Tests replace get_repository and get_sms_service through
app.dependency_overrides.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.exceptions import AuthenticationError
from app.core.logging import get_logger
from app.core.security import decode_access_token
from app.db.redis_client import get_redis
from app.models.user import User
from app.repositories.cache_repository import CacheRepository
from app.services.auth_service import AuthService
from app.services.receipt_service import ReceiptService
from app.services.sms_service import SmsService
from utils.constants import MISSING_TOKEN_MESSAGE, SESSION_EXPIRED_MESSAGE

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

# Singleton instance
_sms_service: Optional[SmsService] = None


def get_sms_service() -> SmsService:
    global _sms_service
    if _sms_service is None:
        _sms_service = SmsService()
    return _sms_service


def get_repository() -> CacheRepository:
    return CacheRepository(get_redis())


def get_auth_service(
    repository: CacheRepository = Depends(get_repository),
    sms_service: SmsService = Depends(get_sms_service),
) -> AuthService:
    return AuthService(repository, sms_service)


def get_receipt_service(
    repository: CacheRepository = Depends(get_repository),
) -> ReceiptService:
    return ReceiptService(repository)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    repository: CacheRepository = Depends(get_repository),
) -> User:
    """
    Returns the user behind a valid bearer token with a live session.

    Raises:
        AuthenticationError: Missing/invalid token, expired session or
            a session that belongs to a different user
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(MISSING_TOKEN_MESSAGE)

    claims = decode_access_token(credentials.credentials)

    user = await repository.get_session(claims.phone_number)
    if user is None:
        raise AuthenticationError(SESSION_EXPIRED_MESSAGE)

    if user.id != claims.user_id:
        logger.warning(f"Token user {claims.user_id} does not match session user {user.id}")
        raise AuthenticationError(SESSION_EXPIRED_MESSAGE)

    return user
