"""
app/repositories/cache_repository.py

Purpose: Typed access to the Redis store

- Verification codes (TTL'd, one live code per phone number)
- User profiles (permanent) and sessions (TTL'd copies of the profile)
- Receipts (permanent) indexed in a per-user set

This is the only module that talks to Redis directly.
"""

from typing import List, Optional
from pydantic import ValidationError as PydanticValidationError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from app.core.config import settings
from app.core.exceptions import StorageError
from app.core.logging import get_logger, LogContext
from app.models.receipt import Receipt
from app.models.user import User
from utils.constants import (
    RECEIPT_KEY_PREFIX,
    USER_PROFILE_KEY_PREFIX,
    USER_RECEIPTS_KEY_PREFIX,
    USER_SESSION_KEY_PREFIX,
    VERIFICATION_KEY_PREFIX,
)

logger = get_logger(__name__)


def verification_key(phone_number: str) -> str:
    return f"{VERIFICATION_KEY_PREFIX}:{phone_number}"


def profile_key(phone_number: str) -> str:
    return f"{USER_PROFILE_KEY_PREFIX}:{phone_number}"


def session_key(phone_number: str) -> str:
    return f"{USER_SESSION_KEY_PREFIX}:{phone_number}"


def receipt_key(receipt_id: str) -> str:
    return f"{RECEIPT_KEY_PREFIX}:{receipt_id}"


def user_receipts_key(user_id: str) -> str:
    return f"{USER_RECEIPTS_KEY_PREFIX}:{user_id}"


class CacheRepository:
    """Domain operations over a Redis client"""

    def __init__(self, client: Redis):
        self.client = client

    # ==================== Verification codes ====================

    async def store_verification_code(self, phone_number: str, code: str) -> None:
        """
        Stores the code with the verification TTL, replacing any live code.

        Raises:
            StorageError: If Redis rejects the write
        """
        try:
            await self.client.set(
                verification_key(phone_number),
                code,
                ex=settings.VERIFICATION_CODE_TTL_SECONDS
            )
        except RedisError as e:
            raise StorageError(f"Failed to store verification code: {e}") from e

    async def get_verification_code(self, phone_number: str) -> Optional[str]:
        """
        Returns the live code, or None if none was sent or it has expired.
        """
        try:
            return await self.client.get(verification_key(phone_number))
        except RedisError as e:
            raise StorageError(f"Failed to read verification code: {e}") from e

    async def clear_verification_code(self, phone_number: str) -> None:
        try:
            await self.client.delete(verification_key(phone_number))
        except RedisError as e:
            raise StorageError(f"Failed to clear verification code: {e}") from e

    # ==================== Users & sessions ====================

    async def store_user(self, user: User) -> None:
        """
        Writes the full profile (no expiry) and refreshes the session copy.

        Raises:
            StorageError: If either write fails
        """
        payload = user.model_dump_json()

        with LogContext(user_id=user.id):
            try:
                await self.client.set(profile_key(user.phone_number), payload)
            except RedisError as e:
                raise StorageError(f"Failed to store user: {e}") from e

            try:
                await self.client.set(
                    session_key(user.phone_number),
                    payload,
                    ex=settings.SESSION_TTL_SECONDS
                )
            except RedisError as e:
                raise StorageError(f"Failed to store session: {e}") from e

            logger.debug("User profile and session stored")

    async def get_user(self, phone_number: str) -> Optional[User]:
        """
        Returns the user profile for a phone number, or None if unknown.
        """
        return await self._get_user_record(profile_key(phone_number))

    async def get_session(self, phone_number: str) -> Optional[User]:
        """
        Returns the session copy of the user, or None once it has expired.
        """
        return await self._get_user_record(session_key(phone_number))

    async def _get_user_record(self, key: str) -> Optional[User]:
        try:
            data = await self.client.get(key)
        except RedisError as e:
            raise StorageError(f"Failed to read user: {e}") from e

        if data is None:
            return None

        try:
            return User.model_validate_json(data)
        except PydanticValidationError as e:
            raise StorageError(f"Corrupted user record at {key}") from e

    # ==================== Receipts ====================

    async def store_receipt(self, receipt: Receipt) -> None:
        """
        Stores the receipt (no expiry) and adds it to the owner's index.
        """
        with LogContext(user_id=receipt.user_id, receipt_id=receipt.id):
            try:
                await self.client.set(receipt_key(receipt.id), receipt.model_dump_json())
            except RedisError as e:
                raise StorageError(f"Failed to store receipt: {e}") from e

            try:
                await self.client.sadd(user_receipts_key(receipt.user_id), receipt.id)
            except RedisError as e:
                raise StorageError(f"Failed to add receipt to user list: {e}") from e

            logger.info("Receipt stored")

    async def get_user_receipts(self, user_id: str) -> List[Receipt]:
        """
        Best-effort aggregate read of a user's receipts.

        Receipts that are missing or fail to decode are skipped, so the
        result may be partial. Only a failure to read the index itself
        is raised.

        Raises:
            StorageError: If the receipt index cannot be read
        """
        try:
            receipt_ids = await self.client.smembers(user_receipts_key(user_id))
        except RedisError as e:
            raise StorageError(f"Failed to get user receipt IDs: {e}") from e

        receipts = []
        for receipt_id in receipt_ids:
            try:
                data = await self.client.get(receipt_key(receipt_id))
            except RedisError as e:
                logger.warning(f"Skipping receipt {receipt_id}: {e}")
                continue

            if data is None:
                logger.warning(f"Skipping receipt {receipt_id}: not found")
                continue

            try:
                receipts.append(Receipt.model_validate_json(data))
            except PydanticValidationError:
                logger.warning(f"Skipping receipt {receipt_id}: corrupted data")

        return receipts
