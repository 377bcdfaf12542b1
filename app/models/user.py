"""
app/models/user.py

Purpose: User record

- Opaque random identifier
- Phone number (natural key for lookup)
- Creation and last-login timestamps
- Verified flag

Stored twice: a permanent profile and a 24-hour session copy.
"""

from pydantic import BaseModel, Field
from datetime import datetime

from utils.time_utils import utc_now
from utils.token_utils import generate_user_id


class User(BaseModel):
    id: str = Field(default_factory=generate_user_id, description="Opaque user identifier")
    phone_number: str = Field(..., description="Phone number as submitted at verification")
    created_at: datetime = Field(default_factory=utc_now)
    last_login: datetime = Field(default_factory=utc_now)
    is_verified: bool = False

    def mark_logged_in(self) -> "User":
        """Refreshes last_login and sets the verified flag."""
        self.last_login = utc_now()
        self.is_verified = True
        return self
