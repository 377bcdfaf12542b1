"""
app/schemas/auth.py

Purpose: Request/response payloads for the verification flow

- Fields are optional at the schema level so the handlers can
  report which required field is missing or empty
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class VerificationRequest(BaseModel):
    phone_number: Optional[str] = Field(None, description="Phone number to send the code to")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"phone_number": "555-123-4567"}
        }
    )


class UserLogin(BaseModel):
    phone_number: Optional[str] = Field(None, description="Phone number the code was sent to")
    code: Optional[str] = Field(None, description="Verification code received by SMS")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"phone_number": "555-123-4567", "code": "042917"}
        }
    )


class VerificationResponse(BaseModel):
    message: str
    success: bool
