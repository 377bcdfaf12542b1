"""
utils/phone_utils.py

Purpose: Phone number handling for SMS dispatch

- Strips formatting characters
- Produces the E.164-style destination the SMS provider expects
"""

import re
from typing import Optional

from app.core.config import settings


def digits_only(phone: str) -> str:
    """
    Removes every non-digit character.

    Example: "(555) 123-4567" -> "5551234567"
    """
    return re.sub(r"\D", "", phone or "")


def format_phone_number(phone: str, country_code: Optional[str] = None) -> str:
    """
    Normalizes a phone number for the SMS provider.

    - 10 digits: national number, the default country code is prepended
    - 11 digits starting with the country code: "+" is prepended
    - anything else: assumed to be already qualified, "+" is prepended

    Args:
        phone: Phone number as entered by the user
        country_code: Calling code for national numbers (defaults to settings)

    Returns:
        Formatted number, e.g. "+15551234567"
    """
    country_code = country_code or settings.SMS_DEFAULT_COUNTRY_CODE
    clean = digits_only(phone)

    if len(clean) == 10:
        return f"+{country_code}{clean}"

    # 11 digits with a leading country code, or an already qualified number
    return f"+{clean}"


def mask_phone(phone: str) -> str:
    """
    Masks all but the last four digits for logging.
    """
    clean = digits_only(phone)
    if len(clean) <= 4:
        return "*" * len(clean)
    return "*" * (len(clean) - 4) + clean[-4:]
