"""
Configuration management for the guardian service
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Guardian service configuration loaded from environment variables"""

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./guardian.db"

    # Access tokens
    SECRET_KEY: str = "change-this-secret-in-prod"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Password hashing (pbkdf2_sha256 rounds)
    HASH_ROUNDS: int = 29000

    # Forget password flow
    VERIFICATION_TOKEN_EXPIRE_MINUTES: int = 15
    APP_URL: str = "http://localhost:3000"

    # Mail transport, unset MAIL_USER means mails are only logged
    MAIL_SERVER: str = "smtp.gmail.com"
    MAIL_PORT: int = 587
    MAIL_USER: str = ""
    MAIL_PASS: str = ""
    MAIL_FROM: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "./logs"

    # Enables /dev/error-logs
    DEV_MODE: bool = False

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
