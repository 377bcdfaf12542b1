"""
app/services/sms_service.py

Purpose: SMS delivery via Twilio

- Formats the destination number for the provider
- Sends plain text messages through the Twilio Messages API
- Raises DeliveryError when the provider does not accept the message
"""

import httpx
from typing import Dict, Any, Optional
from app.core.config import settings
from app.core.exceptions import DeliveryError
from app.core.logging import get_logger
from utils.phone_utils import format_phone_number, mask_phone

logger = get_logger(__name__)


class SmsService:
    """Service for sending SMS messages via Twilio"""

    def __init__(
        self,
        account_sid: Optional[str] = None,
        auth_token: Optional[str] = None,
        from_number: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.account_sid = account_sid or settings.TWILIO_ACCOUNT_SID
        self.auth_token = auth_token or settings.TWILIO_AUTH_TOKEN
        self.from_number = from_number or settings.TWILIO_SMS_NUMBER
        self.base_url = f"{settings.TWILIO_API_URL}/Accounts/{self.account_sid}"
        self._transport = transport

    async def send_sms(self, to_phone: str, message: str) -> Dict[str, Any]:
        """
        Sends an SMS message via Twilio

        Args:
            to_phone: Recipient phone in any common format ("555-123-4567")
            message: Message text

        Returns:
            {"message_sid": "SMxxx...", "status": "queued"}

        Raises:
            DeliveryError: If the provider is unreachable or rejects the message
        """
        destination = format_phone_number(to_phone)

        if not self.is_configured():
            logger.error("Twilio is not configured; cannot send SMS")
            raise DeliveryError("SMS provider is not configured")

        url = f"{self.base_url}/Messages.json"
        data = {
            "From": self.from_number,
            "To": destination,
            "Body": message
        }

        logger.info(f"📤 Sending SMS to {mask_phone(destination)}")

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    url,
                    data=data,
                    auth=(self.account_sid, self.auth_token),
                    timeout=settings.SMS_TIMEOUT_SECONDS
                )
        except httpx.TimeoutException as e:
            logger.error("Twilio API timeout")
            raise DeliveryError("SMS provider timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Error sending SMS: {e}", exc_info=True)
            raise DeliveryError(f"Failed to send SMS: {e}") from e

        if response.status_code not in (200, 201):
            logger.error(f"❌ Twilio API error: {response.status_code} - {response.text}")
            raise DeliveryError(
                f"Failed to send SMS: provider returned {response.status_code}",
                details={"provider_status": response.status_code}
            )

        result = response.json()
        logger.info(f"✅ SMS sent: SID={result.get('sid')}")

        return {
            "message_sid": result.get("sid"),
            "status": result.get("status")
        }

    def is_configured(self) -> bool:
        """Check if Twilio is properly configured"""
        return bool(
            self.account_sid
            and self.auth_token
            and self.from_number
            and self.account_sid != "your_twilio_sid"
        )
