"""
app/services/auth_service.py

Purpose: Phone verification and login

- Generates and stores verification codes
- Sends codes by SMS
- Checks submitted codes, creates or refreshes the user
- Mints the bearer token and clears the used code
"""

from app.core.config import settings
from app.core.exceptions import AuthenticationError, StorageError
from app.core.logging import get_logger, LogContext
from app.core.security import create_access_token
from app.models.auth import AuthResponse
from app.models.user import User
from app.repositories.cache_repository import CacheRepository
from app.schemas.auth import VerificationResponse
from app.services.sms_service import SmsService
from utils.constants import (
    CODE_SENT_MESSAGE,
    INVALID_CODE_MESSAGE,
    INVALID_OR_EXPIRED_CODE_MESSAGE,
    VERIFICATION_CODE_LENGTH,
    VERIFICATION_SMS_TEMPLATE,
)
from utils.time_utils import ttl_minutes
from utils.token_utils import generate_verification_code

logger = get_logger(__name__)


class AuthService:
    """Orchestrates the send-code / verify-code flow"""

    def __init__(self, repository: CacheRepository, sms_service: SmsService):
        self.repository = repository
        self.sms_service = sms_service

    async def send_verification_code(self, phone_number: str) -> VerificationResponse:
        """
        Generates a code, stores it and sends it by SMS.

        A new code replaces any live code for the same number. If the SMS
        fails the stored code is kept.

        Args:
            phone_number: Non-empty phone number as submitted

        Returns:
            VerificationResponse on success

        Raises:
            StorageError: If the code cannot be stored
            DeliveryError: If the SMS cannot be sent
        """
        with LogContext(phone_number=phone_number):
            code = generate_verification_code(VERIFICATION_CODE_LENGTH)

            await self.repository.store_verification_code(phone_number, code)

            message = VERIFICATION_SMS_TEMPLATE.format(
                code=code,
                minutes=ttl_minutes(settings.VERIFICATION_CODE_TTL_SECONDS)
            )
            await self.sms_service.send_sms(phone_number, message)

            logger.info("Verification code sent")
            logger.debug(f"Verification code: {code}")

            return VerificationResponse(message=CODE_SENT_MESSAGE, success=True)

    async def verify_code_and_login(self, phone_number: str, code: str) -> AuthResponse:
        """
        Verifies the code and logs the user in, registering them on first use.

        Args:
            phone_number: Phone number the code was sent to
            code: Code submitted by the user

        Returns:
            AuthResponse with the user and a fresh bearer token

        Raises:
            AuthenticationError: If no live code exists or the code does not match
            StorageError: If the user cannot be read or written
        """
        with LogContext(phone_number=phone_number):
            stored_code = await self.repository.get_verification_code(phone_number)
            if stored_code is None:
                logger.info("Verification attempted without a live code")
                raise AuthenticationError(INVALID_OR_EXPIRED_CODE_MESSAGE)

            # TODO: switch to secrets.compare_digest and count failed attempts per number
            if stored_code != code:
                logger.info("Verification code mismatch")
                raise AuthenticationError(INVALID_CODE_MESSAGE)

            user = await self.repository.get_user(phone_number)
            if user is None:
                user = User(phone_number=phone_number, is_verified=True)
                logger.info(f"Creating new user {user.id}")
            else:
                user.mark_logged_in()
                logger.info(f"User {user.id} logged in")

            # Not atomic with the read above; concurrent logins are last-writer-wins
            await self.repository.store_user(user)

            token = create_access_token(user)

            try:
                await self.repository.clear_verification_code(phone_number)
            except StorageError as e:
                logger.warning(f"Could not clear used verification code: {e.message}")

            return AuthResponse(user=user, token=token)
