"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="ChefKit", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=5000, ge=1, le=65535, description="Server port")

    # MongoDB settings
    db_user: str = Field(default="", description="MongoDB username")
    db_pass: str = Field(default="", description="MongoDB password")
    mongo_host: str = Field(
        default="cluster0.sqaw1iw.mongodb.net", description="MongoDB Atlas cluster host"
    )
    mongo_uri: Optional[str] = Field(
        default=None, description="Full MongoDB URI, overrides user/pass/host"
    )
    mongo_db_name: str = Field(default="chefkitDB", description="MongoDB database name")
    users_collection: str = Field(default="users", description="Users collection")
    meal_kits_collection: str = Field(
        default="mealKits", description="Meal kits collection"
    )
    mongo_max_idle_time_ms: int = Field(default=10000, ge=0)
    mongo_server_selection_timeout_ms: int = Field(default=5000, ge=0)
    mongo_socket_timeout_ms: int = Field(default=10000, ge=0)

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5000",
            "https://chefkit-client-side.vercel.app",
        ],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_title: str = Field(default="ChefKit API", description="API documentation title")
    api_description: str = Field(
        default="Meal-kit marketplace backend for users and meal kits",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def database_uri(self) -> str:
        """Connection string for the document store."""
        if self.mongo_uri:
            return self.mongo_uri
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
            f"@{self.mongo_host}/{self.mongo_db_name}?retryWrites=true&w=majority"
        )

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT


# Global settings instance
settings = Settings()
