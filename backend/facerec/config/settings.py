"""Configuração da aplicação carregada de variáveis de ambiente."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from FACEREC_* environment variables or .env."""

    app_name: str = "Face Recognition Registry API"
    app_version: str = "1.0.0"
    environment: str = Field(default="development", description="deployment environment")

    # sqlite para desenvolvimento; em produção: postgresql+psycopg2://...
    database_url: str = "sqlite:///./facerec.db"
    database_echo: bool = False

    log_level: str = Field(default="INFO", description="Logging level")

    cors_origins: List[str] = Field(
        default=["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Allowed CORS origins",
    )

    max_images_per_face_rec: int = Field(default=6, ge=1)
    max_files_per_upload: int = Field(default=1, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="FACEREC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
