"""
Send a test SMS through Twilio

Run this script to verify Twilio is configured correctly
and can deliver messages.

Usage: python scripts/send_test_sms.py
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from app.core.config import settings
from app.core.exceptions import DeliveryError
from app.services.sms_service import SmsService
from utils.phone_utils import format_phone_number


def check_twilio_config(sms_service: SmsService) -> bool:
    """Check if Twilio is properly configured"""
    print("=" * 60)
    print("  Twilio Configuration")
    print("=" * 60 + "\n")

    print(f"Account SID: {settings.TWILIO_ACCOUNT_SID[:10]}..." if settings.TWILIO_ACCOUNT_SID else "Account SID: ❌ Not set")
    print(f"Auth Token: {'✅ Set' if settings.TWILIO_AUTH_TOKEN else '❌ Not set'}")
    print(f"Sender Number: {settings.TWILIO_SMS_NUMBER}")
    print(f"\nConfiguration valid: {'✅ Yes' if sms_service.is_configured() else '❌ No'}\n")

    if not sms_service.is_configured():
        print("⚠️  Please set TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and TWILIO_SMS_NUMBER in .env")
        return False

    return True


async def send_message(sms_service: SmsService):
    """Send a test SMS to a number entered on the console"""
    phone = input("Enter a phone number (e.g. 555-123-4567 or +447911123456): ")
    print(f"\n📤 Sending test message to {format_phone_number(phone)}...")

    try:
        result = await sms_service.send_sms(phone, "Test message: SMS delivery is working.")
    except DeliveryError as e:
        print(f"\n❌ Failed to send message")
        print(f"Error: {e.message}")
        return

    print(f"\n✅ Message sent successfully!")
    print(f"Message SID: {result.get('message_sid')}")
    print(f"Status: {result.get('status')}")


async def main():
    sms_service = SmsService()

    if not check_twilio_config(sms_service):
        return

    if input("Do you want to send a test message? (y/n): ").lower() == "y":
        await send_message(sms_service)

    print("\n" + "=" * 60 + "\n")


if __name__ == "__main__":
    asyncio.run(main())
