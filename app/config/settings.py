"""
Application settings and configuration
"""
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings from environment variables"""

    # Basic app settings
    DEBUG: bool = Field(default=False)
    APP_NAME: str = Field(default="Sri Ragavendre Agro Services API")

    # Server settings
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)
    ALLOWED_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # Admin (owner) authentication
    ADMIN_EMAIL: str = Field(default="owner@sriragavendreagro.com")
    ADMIN_PASSWORD_HASH: str = Field(default="")  # passlib pbkdf2_sha256 hash
    JWT_SECRET_KEY: str = Field(
        default="change-this-jwt-secret-in-production-use-long-random-string"
    )
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=480)  # 8 hours

    # SMTP settings
    EMAIL_HOST: str = "smtp.gmail.com"
    EMAIL_PORT: int = 587
    EMAIL_USE_TLS: bool = True
    EMAIL_USERNAME: str = ""
    EMAIL_PASSWORD: str = ""
    EMAIL_FROM_ADDRESS: str = "noreply@sriragavendreagro.com"
    EMAIL_FROM_NAME: str = "Sri Ragavendre Agro Industries"
    EMAIL_TIMEOUT_SECONDS: int = 20
    OWNER_NOTIFICATION_EMAIL: str = Field(default="owner@sriragavendreagro.com")
    EMAIL_NOTIFICATIONS_ENABLED: bool = Field(default=True)

    # Database settings
    DATABASE_URL: str = Field(default="sqlite:///./agro_services.db")
    DB_POOL_SIZE: int = Field(default=10)
    DB_MAX_OVERFLOW: int = Field(default=20)
    AUTO_CREATE_TABLES: bool = Field(default=True)

    # Redis settings
    REDIS_URL: str = Field(default="redis://localhost:6379/0")
    REDIS_MAX_CONNECTIONS: int = Field(default=50)

    # Celery settings
    CELERY_BROKER_URL: str = Field(default="redis://localhost:6379/1")
    CELERY_RESULT_BACKEND: str = Field(default="redis://localhost:6379/2")
    CELERY_TASK_SERIALIZER: str = Field(default="json")

    # Business settings
    BUSINESS_NAME: str = Field(default="Sri Ragavendre Agro Industries")
    BUSINESS_CONTACT_PHONE: str = Field(default="+91 9876543210")
    CURRENCY_SYMBOL: str = Field(default="₹")
    DELIVERY_CHARGE: float = Field(default=50)

    # Booking window: first slot at open hour, last slot starts before close hour
    BOOKING_OPEN_HOUR: int = Field(default=10, ge=0, le=23)
    BOOKING_CLOSE_HOUR: int = Field(default=17, ge=1, le=24)
    BOOKING_SLOT_INTERVAL_MINUTES: int = Field(default=15, ge=5)

    # Public form submissions per client IP per minute
    PUBLIC_RATE_LIMIT_PER_MINUTE: int = Field(default=30)

    # Monitoring settings
    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # allows extra env vars without breaking
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Convenience accessor for settings
settings = get_settings()
