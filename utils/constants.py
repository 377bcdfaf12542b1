"""
utils/constants.py

Purpose: Centralized static content

- Key namespaces for the Redis store
- User-facing messages and error texts
- Fixed endpoint bodies

(Prevents hardcoding across the codebase)
"""

# ============================================================
# REDIS KEY NAMESPACES
# ============================================================

VERIFICATION_KEY_PREFIX = "verification"
USER_PROFILE_KEY_PREFIX = "user:profile"
USER_SESSION_KEY_PREFIX = "user:session"
USER_RECEIPTS_KEY_PREFIX = "user:receipts"
RECEIPT_KEY_PREFIX = "receipt"

# ============================================================
# SMS CONTENT
# ============================================================

VERIFICATION_SMS_TEMPLATE = "Your verification code is: {code}. Valid for {minutes} minutes."

# ============================================================
# RESPONSE MESSAGES
# ============================================================

CODE_SENT_MESSAGE = "Verification code sent successfully"

PHONE_REQUIRED_MESSAGE = "Phone number is required"
PHONE_AND_CODE_REQUIRED_MESSAGE = "Phone number and code are required"
INVALID_OR_EXPIRED_CODE_MESSAGE = "Invalid or expired verification code"
INVALID_CODE_MESSAGE = "Invalid verification code"
MISSING_TOKEN_MESSAGE = "Missing bearer token"
INVALID_TOKEN_MESSAGE = "Invalid or expired token"
SESSION_EXPIRED_MESSAGE = "Session expired"

# ============================================================
# FIXED BODIES
# ============================================================

HEALTH_BODY = "OK"
GOODBYE_BODY = "Goodbye, World!"

# ============================================================
# FIXED LIMITS
# ============================================================

VERIFICATION_CODE_LENGTH = 6
TOKEN_TTL_SECONDS = 24 * 60 * 60
TOKEN_TYPE = "Bearer"
