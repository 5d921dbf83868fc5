"""Application settings and configuration."""

from typing import Literal

from pydantic import Field, model_validator  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict  # type: ignore


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    ENV: Literal["dev", "staging", "prod", "test"] = Field(default="dev")
    PROJECT_NAME: str = Field(default="Exam Authoring API")

    # API
    API_PREFIX: str = Field(default="/v1")

    # CORS - Accept string or list, will be normalized to list
    CORS_ORIGINS: str | list[str] = Field(default="http://localhost:3000,http://localhost:5173")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # CSV import
    IMPORT_ENCODING: str = Field(default="utf-8-sig")
    IMPORT_MAX_ROWS: int = Field(default=5000)
    MAX_BODY_BYTES_IMPORT: int = Field(default=5 * 1024 * 1024)  # 5 MB

    # Manual authoring
    DEFAULT_EXAM_DURATION_MINUTES: int = Field(default=60)

    # Drafts held in memory per app; the least recently used is evicted past this
    MAX_OPEN_DRAFTS: int = Field(default=1000)

    @model_validator(mode="before")
    @classmethod
    def parse_cors_origins(cls, data):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(data, dict) and "CORS_ORIGINS" in data:
            cors_origins = data["CORS_ORIGINS"]
            if isinstance(cors_origins, str):
                data["CORS_ORIGINS"] = [
                    origin.strip() for origin in cors_origins.split(",") if origin.strip()
                ]
        return data

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if isinstance(self.CORS_ORIGINS, str):
            object.__setattr__(
                self,
                "CORS_ORIGINS",
                [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()],
            )
        if self.IMPORT_MAX_ROWS < 1:
            raise ValueError("IMPORT_MAX_ROWS must be at least 1")
        if self.DEFAULT_EXAM_DURATION_MINUTES < 1:
            raise ValueError("DEFAULT_EXAM_DURATION_MINUTES must be at least 1")
        if self.MAX_OPEN_DRAFTS < 1:
            raise ValueError("MAX_OPEN_DRAFTS must be at least 1")


# Global settings instance
settings = Settings()
