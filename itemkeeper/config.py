"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    host: str = "127.0.0.1"
    port: int = 5000
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    # JWT Configuration
    jwt_secret_key: str = "change-me-in-production-use-env-var"
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = 3600

    # Bcrypt work factor for hashes produced at runtime
    # Seeded hashes carry their own cost
    bcrypt_work_factor: int = 10

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False
    )


settings = Settings()
