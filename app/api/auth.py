"""
app/api/auth.py

Purpose: Phone verification endpoints

- POST /auth/send-code: sends a verification code by SMS
- POST /auth/verify: checks the code, returns the user and a bearer token
- GET /auth/me: returns the user behind the current session
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_auth_service, get_current_user
from app.core.exceptions import ValidationError
from app.core.logging import get_logger
from app.models.auth import AuthResponse
from app.models.user import User
from app.schemas.auth import UserLogin, VerificationRequest, VerificationResponse
from app.services.auth_service import AuthService
from utils.constants import PHONE_AND_CODE_REQUIRED_MESSAGE, PHONE_REQUIRED_MESSAGE

logger = get_logger(__name__)
router = APIRouter(prefix="/auth")


def _present(value) -> bool:
    return bool(value and value.strip())


@router.post("/send-code", response_model=VerificationResponse)
async def send_verification_code(
    request: VerificationRequest,
    service: AuthService = Depends(get_auth_service),
):
    """
    Sends an SMS verification code to the user's phone number.
    """
    if not _present(request.phone_number):
        raise ValidationError(PHONE_REQUIRED_MESSAGE)

    return await service.send_verification_code(request.phone_number)


@router.post("/verify", response_model=AuthResponse, response_model_exclude_none=True)
async def verify_code_and_login(
    request: UserLogin,
    service: AuthService = Depends(get_auth_service),
):
    """
    Verifies the code and logs in or registers the user.
    """
    if not _present(request.phone_number) or not _present(request.code):
        raise ValidationError(PHONE_AND_CODE_REQUIRED_MESSAGE)

    return await service.verify_code_and_login(request.phone_number, request.code)


@router.get("/me", response_model=User)
async def read_current_user(user: User = Depends(get_current_user)):
    """
    Returns the authenticated user from their live session.
    """
    return user
