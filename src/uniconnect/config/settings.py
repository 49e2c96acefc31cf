"""
Application settings for the uniconnect backend.

All options are read from the environment (or a local ``.env`` file) through
pydantic-settings. Secrets are held as ``SecretStr`` so they never show up in
reprs or logs.
"""
import re
from datetime import timedelta
from functools import lru_cache
from typing import List

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_DURATION_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m|h|d|w)?\s*$", re.IGNORECASE)

_DURATION_UNITS = {
    "ms": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
    "w": timedelta(weeks=1),
}


def parse_duration(value: str) -> timedelta:
    """Parse a duration string such as ``15m``, ``1h`` or ``900``.

    A bare number is a count of seconds.
    """
    match = _DURATION_PATTERN.match(value or "")
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return float(amount) * _DURATION_UNITS[(unit or "s").lower()]


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class AppSettings(BaseSettings):
    """Settings consumed by the API, the auth subsystem and the store."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Core Application Settings
    app_name: str = Field(default="uniconnect-backend")
    environment: str = Field(default="development", pattern="^(development|test|production)$")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000, gt=0)
    cors_origins: str = Field(default="*")
    
    # Database Configuration
    database_url: str = Field(..., min_length=1)
    db_pool_min_size: int = Field(default=1, ge=0)
    db_pool_max_size: int = Field(default=10, gt=0)
    db_command_timeout: int = Field(default=60, gt=0)
    
    # Google Sign-In
    google_client_id: str = Field(..., min_length=1)
    google_client_ids: str = Field(default="")
    google_allowed_domains: str = Field(default="")
    
    # Token Configuration
    jwt_access_secret: SecretStr
    access_token_ttl: str = Field(default="15m")
    refresh_token_pepper: SecretStr
    refresh_token_ttl_days: int = Field(default=30, gt=0)
    
    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="simple")
    
    @field_validator("jwt_access_secret")
    @classmethod
    def validate_access_secret(cls, v: SecretStr) -> SecretStr:
        if len(v.get_secret_value()) < 32:
            raise ValueError("JWT_ACCESS_SECRET must be at least 32 characters")
        return v
    
    @field_validator("refresh_token_pepper")
    @classmethod
    def validate_refresh_pepper(cls, v: SecretStr) -> SecretStr:
        if len(v.get_secret_value()) < 16:
            raise ValueError("REFRESH_TOKEN_PEPPER must be at least 16 characters")
        return v
    
    @field_validator("access_token_ttl")
    @classmethod
    def validate_access_token_ttl(cls, v: str) -> str:
        if parse_duration(v) <= timedelta(0):
            raise ValueError("ACCESS_TOKEN_TTL must be positive")
        return v
    
    @field_validator("database_url")
    @classmethod
    def strip_driver_suffix(cls, v: str) -> str:
        return v.replace("+asyncpg", "")
    
    @property
    def accepted_client_ids(self) -> List[str]:
        """Audiences accepted on Google ID tokens."""
        return [self.google_client_id, *_split_csv(self.google_client_ids)]
    
    @property
    def allowed_domains(self) -> List[str]:
        """Institutional email domains; empty means open registration."""
        return [domain.lower() for domain in _split_csv(self.google_allowed_domains)]
    
    @property
    def access_token_ttl_delta(self) -> timedelta:
        return parse_duration(self.access_token_ttl)
    
    @property
    def cors_origin_list(self) -> List[str]:
        return _split_csv(self.cors_origins) or ["*"]
    
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> AppSettings:
    """Get cached settings instance."""
    return AppSettings()
