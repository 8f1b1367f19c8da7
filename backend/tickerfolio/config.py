"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production-dev-only-secret-key"


class Settings(BaseSettings):
    """Application settings."""

    # Database
    database_url: str = "sqlite:///./data/app.db"

    # Authentication
    jwt_secret_key: str = DEFAULT_JWT_SECRET  # Generate with: openssl rand -hex 32
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Rate limiting (register/login)
    auth_rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True

    # Application
    log_level: str = "INFO"
    debug: bool = False

    # CORS
    allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


settings = Settings()
