"""
app/models/auth.py

Purpose: Authentication value objects

- AuthToken returned to the client after verification
- TokenClaims carried inside the signed bearer token
- AuthResponse pairing the user with the token
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.models.user import User


class AuthToken(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int = Field(..., description="Validity window in seconds")
    expires_at: datetime
    refresh_token: Optional[str] = None


class TokenClaims(BaseModel):
    user_id: str
    phone_number: str
    exp: int


class AuthResponse(BaseModel):
    user: User
    token: AuthToken
