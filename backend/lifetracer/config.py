"""
Application configuration using pydantic-settings.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./lifetracer.db"

    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Life Tracer"

    # Authentication is handled upstream; the gateway forwards the user id
    owner_header: str = "X-Owner-Id"

    # CORS
    backend_cors_origins: list[str] = [
        "http://localhost:5173",  # Vite dev server
        "http://localhost:4173",  # Vite preview
        "http://localhost:3000",
    ]

    # Timeline layout
    timeline_start_padding: int = 50  # px above the first ruler year
    zoom_default: int = 100  # pixels per year
    zoom_min: int = 100
    zoom_max: int = 4000
    zoom_step: int = 100
    band_years: int = 25  # years per row in the global view

    class Config:
        env_file = ".env"
        extra = "ignore"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
