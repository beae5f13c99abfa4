"""
Application settings loaded from environment variables.
Uses pydantic-settings for type-safe configuration.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


DEFAULT_ALLOWED_MIME_TYPES = ",".join([
    "image/jpeg",
    "image/png",
    "image/gif",
    "application/pdf",
    "text/plain",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
])


class Settings(BaseSettings):
    """Application settings with defaults for development."""

    # Database
    # DATABASE_TYPE selects the backend: postgresql | mysql | sqlite
    database_type: str = "postgresql"
    database_url: str | None = None
    db_host: str | None = None
    db_port: int | None = None
    db_user: str | None = None
    db_password: str | None = None
    db_name: str | None = None
    sqlite_file: str | None = None

    # Identity provider tokens (bearer JWTs issued by the external IdP)
    auth_jwt_secret: str = "dev-secret-change-in-production"
    auth_jwt_algorithms: str = "HS256"
    auth_issuer: str | None = None
    auth_audience: str | None = None

    # Comma-separated list of allowed origins (empty uses default localhost list)
    allowed_origins: str = ""

    # Server
    port: int = 5000

    # Environment
    environment: str = "development"
    debug: bool = True

    # Logging
    log_level: str | None = None
    enable_request_logging: bool = True

    # Rate limiting: at most rate_limit_max requests per window, per client IP
    rate_limit_enabled: bool = True
    rate_limit_max: int = 1000
    rate_limit_window_seconds: int = 900

    # Document metadata limits
    max_file_size: int = 10 * 1024 * 1024  # 10 MB
    allowed_mime_types: str = DEFAULT_ALLOWED_MIME_TYPES
    upload_path: str = "./uploads"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def jwt_algorithms(self) -> list[str]:
        return [a.strip() for a in self.auth_jwt_algorithms.split(",") if a.strip()]

    @property
    def allowed_mime_type_list(self) -> list[str]:
        return [m.strip() for m in self.allowed_mime_types.split(",") if m.strip()]

    @property
    def rate_limit(self) -> str:
        """Default limit in slowapi notation, e.g. "1000/900 seconds"."""
        return f"{self.rate_limit_max}/{self.rate_limit_window_seconds} seconds"

    def validate_production_secrets(self) -> list[str]:
        """
        Validate that secrets are properly configured for production.
        Returns a list of validation errors. Empty list means all checks pass.
        """
        errors = []

        weak_secrets = {
            "dev-secret-change-in-production",
            "secret",
            "password",
            "changeme",
            "default",
        }

        if self.environment == "production":
            if self.auth_jwt_algorithms.upper().startswith("HS") and (
                self.auth_jwt_secret in weak_secrets or len(self.auth_jwt_secret) < 32
            ):
                errors.append(
                    "AUTH_JWT_SECRET must be at least 32 characters and not a default value in production"
                )

            if self.debug:
                errors.append("DEBUG must be False in production")

            if not self.allowed_origins:
                errors.append(
                    "ALLOWED_ORIGINS must be set in production (comma-separated list of allowed domains)"
                )

        return errors


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export
settings = get_settings()
