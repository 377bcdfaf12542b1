"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables
- Centralizes config values (Redis, Twilio, token secrets, TTLs)
- Validates configuration on startup
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal


DEFAULT_SECRET_KEY = "change-me-in-production-with-a-long-random-secret"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Validates all required configs on startup.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Redis
    REDIS_HOST: str = Field(
        default="localhost",
        description="Redis server host"
    )
    REDIS_PORT: int = Field(
        default=6379,
        description="Redis server port"
    )
    REDIS_PASSWORD: Optional[str] = Field(
        default=None,
        description="Redis password"
    )
    REDIS_DB: int = Field(
        default=0,
        description="Redis logical database index"
    )
    REDIS_MAX_CONNECTIONS: int = Field(
        default=10,
        description="Maximum connections in the Redis pool"
    )
    REDIS_SOCKET_CONNECT_TIMEOUT: float = Field(
        default=5.0,
        description="Redis dial timeout in seconds"
    )
    REDIS_SOCKET_TIMEOUT: float = Field(
        default=3.0,
        description="Redis read/write timeout in seconds"
    )
    REDIS_CONNECT_RETRIES: int = Field(
        default=5,
        description="Connection attempts at startup before giving up"
    )
    REDIS_RETRY_DELAY_SECONDS: float = Field(
        default=2.0,
        description="Fixed delay between startup connection attempts"
    )

    # Twilio SMS
    TWILIO_ACCOUNT_SID: Optional[str] = Field(
        default=None,
        description="Twilio account SID"
    )
    TWILIO_AUTH_TOKEN: Optional[str] = Field(
        default=None,
        description="Twilio auth token"
    )
    TWILIO_SMS_NUMBER: Optional[str] = Field(
        default=None,
        description="Twilio sender number in E.164 format"
    )
    TWILIO_API_URL: str = Field(
        default="https://api.twilio.com/2010-04-01",
        description="Twilio REST API base URL"
    )
    SMS_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="SMS provider request timeout in seconds"
    )
    SMS_DEFAULT_COUNTRY_CODE: str = Field(
        default="1",
        description="Country calling code prepended to national 10-digit numbers"
    )

    # Verification & sessions
    VERIFICATION_CODE_TTL_SECONDS: int = Field(
        default=600,
        description="Verification code lifetime in seconds"
    )
    SESSION_TTL_SECONDS: int = Field(
        default=86400,
        description="Session lifetime in seconds, refreshed on every login"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    PORT: int = Field(
        default=10471,
        description="Port the HTTP server listens on"
    )
    CORS_ORIGINS: list = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    # Security
    SECRET_KEY: str = Field(
        default=DEFAULT_SECRET_KEY,
        description="Secret used to sign bearer tokens"
    )
    JWT_ALGORITHM: str = Field(
        default="HS256",
        description="Bearer token signing algorithm"
    )

    @validator("SECRET_KEY")
    def validate_secret_key(cls, v, values):
        """Ensure secret key is changed in production."""
        if values.get("ENVIRONMENT") == "production" and v == DEFAULT_SECRET_KEY:
            raise ValueError("SECRET_KEY must be changed in production environment")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def validate_settings():
    """
    Validates critical settings on application startup.
    Raises ValueError if any required setting is missing or invalid.
    """
    errors = []

    if not settings.REDIS_HOST:
        errors.append("REDIS_HOST is required")

    if settings.VERIFICATION_CODE_TTL_SECONDS <= 0:
        errors.append("VERIFICATION_CODE_TTL_SECONDS must be positive")

    # Production-specific validations
    if settings.is_production:
        if not settings.TWILIO_ACCOUNT_SID or not settings.TWILIO_AUTH_TOKEN:
            errors.append("TWILIO_ACCOUNT_SID and TWILIO_AUTH_TOKEN are required in production")
        if not settings.TWILIO_SMS_NUMBER:
            errors.append("TWILIO_SMS_NUMBER is required in production")

    if errors:
        raise ValueError(f"Configuration validation failed: {', '.join(errors)}")

    return True
