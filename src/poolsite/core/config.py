from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Pool Site CMS"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True
    auto_migrate: bool = False  # run alembic upgrade head on startup
    shutdown_grace_period: float = 30.0  # seconds to drain in-flight requests

    # Database
    database_url: str
    database_migrations_url: str | None = None
    database_pool_size: int = 10
    database_max_overflow: int = 10
    database_ssl_mode: str = "prefer"  # disable, prefer, require, verify-ca, verify-full

    # Auth
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    auth_cookie_name: str = "token"
    auth_cookie_secure: bool = False
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 65536
    argon2_parallelism: int = 1

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    # CORS
    cors_origins: list[str] = ["http://localhost:3045"]

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    # Rate limiting (slowapi limit strings)
    login_rate_limit: str = "5/minute"
    contact_rate_limit: str = "10/hour"
    # Global per-IP token bucket: full burst refills over the window
    global_rate_limit_requests: int = 100
    global_rate_limit_window_seconds: int = 15 * 60

    # Project documents
    upcoming_milestone_days: int = 7
    search_result_limit: int = 50
    public_projects_default_limit: int = 6


@lru_cache
def get_settings() -> Settings:
    return Settings()
