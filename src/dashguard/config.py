"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dashguard.domain.value_objects import Role


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Keycloak OIDC
    keycloak_url: str = Field(
        default="http://localhost:8080",
        description="Keycloak server URL",
    )
    keycloak_realm: str = Field(default="dashboard", description="Keycloak realm")
    keycloak_client_id: str = Field(default="dashguard-api", description="Keycloak client ID")
    keycloak_client_secret: str = Field(default="", description="Keycloak client secret")

    # Users
    users_seed_file: str = Field(
        default="",
        description="JSON file of user records loaded at startup",
    )
    default_role: Role = Field(
        default=Role.USER,
        description="Role given to new users created without one",
    )

    # Application
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated allowed CORS origins",
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
