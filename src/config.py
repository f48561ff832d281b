from functools import lru_cache
from typing import Annotated, Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    API_NAME: str = "FlowBoard API"
    API_SUMMARY: str = "Track tasks across a small team board"
    APP_VERSION: str = "v1"
    ENVIRONMENT: str = "development"
    API_PREFIX: str = "/api"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    ACCESS_LOG_ENABLED: bool = True

    SEED_SAMPLE_TASKS: bool = True

    CORS_ENABLED: bool = True
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    SECURITY_HEADERS_ENABLED: bool = True

    # OpenTelemetry Settings
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "flowboard"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",")]
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
