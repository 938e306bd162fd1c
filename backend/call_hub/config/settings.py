from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # App
    API_HOST: str = Field("0.0.0.0")
    API_PORT: int = Field(3001)
    DEBUG: bool = Field(False)
    LOG_LEVEL: str = Field("INFO")
    CORS_ALLOW_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # Translation provider
    TRANSLATION_PROVIDER: Literal["gemini", "gcp"] = Field("gemini")
    TRANSLATION_TIMEOUT_SEC: float = Field(20.0)

    # Google Cloud
    GOOGLE_APPLICATION_CREDENTIALS: str | None = Field(None)
    GOOGLE_PROJECT_ID: str | None = Field(None)
    VERTEX_AI_LOCATION: str = Field("us-central1")
    GEMINI_MODEL_NAME: str = Field("gemini-1.5-flash")

    # Metrics
    METRICS_ENABLED: bool = Field(False)
    METRICS_PORT: int = Field(8001)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )


settings = Settings()
