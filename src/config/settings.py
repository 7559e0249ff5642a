from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str
    log_level: str = "INFO"
    environment: str = "dev"  # dev | test | production
    jwt_secret_key: SecretStr
    jwt_refresh_secret_key: SecretStr
    jwt_algorithm: str = "HS256"
    jwt_access_token_expires_minutes: int = 15
    jwt_refresh_token_expires_days: int = 7
    jwt_issuer: str | None = None
    jwt_audience: str | None = None
    # CORS
    cors_allow_origins: str = "http://localhost:5173"
    # passlib schemes, first one hashes new passwords
    password_hash_schemes: str = "bcrypt"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("database_url")
    @classmethod
    def ensure_asyncpg_scheme(cls, value: str) -> str:
        if value.startswith("postgres://"):
            return value.replace("postgres://", "postgresql+asyncpg://", 1)
        if value.startswith("postgresql://") and "+" not in value.split("://", 1)[0]:
            return value.replace("postgresql://", "postgresql+asyncpg://", 1)
        return value

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_allow_origins_list(self) -> list[str]:
        """Convert cors_allow_origins string to list"""
        return [v.strip() for v in self.cors_allow_origins.split(",") if v.strip()]

    @property
    def password_hash_schemes_list(self) -> tuple[str, ...]:
        return tuple(v.strip() for v in self.password_hash_schemes.split(",") if v.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
