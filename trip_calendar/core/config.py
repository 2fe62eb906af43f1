from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "AI Trip Calendar API"
    api_v1_prefix: str = "/api/v1"

    openai_api_key: str = Field(default="", description="OpenAI API key used for itinerary generation")
    openai_model_itinerary: str = "gpt-4.1"
    openai_temperature: float = 0.7
    openai_timeout_seconds: float = 120.0

    locale: Literal["en", "zh-TW"] = "en"
    loading_message_interval_seconds: float = Field(default=3.0, gt=0)

    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
