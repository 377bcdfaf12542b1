"""
utils/token_utils.py

Purpose: Random identifiers and codes

All values come from the `secrets` module.
"""

import secrets


def generate_verification_code(length: int = 6) -> str:
    """
    Generates a zero-padded numeric code of exactly `length` digits.
    """
    return f"{secrets.randbelow(10 ** length):0{length}d}"


def generate_user_id() -> str:
    """
    Generates a 32-character hex user identifier (16 random bytes).
    """
    return secrets.token_hex(16)


def generate_receipt_id() -> str:
    """
    Generates a 24-character hex receipt identifier.
    """
    return secrets.token_hex(12)
