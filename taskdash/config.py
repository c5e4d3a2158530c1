from functools import lru_cache
from typing import Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    TASKDASH_VERSION: str = "v0.1.x"
    API_NAME: str = "TaskDash"
    API_SUMMARY: str = "A task-tracking dashboard backed by a REST API"

    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    CORS_ENABLED: bool = True
    CORS_ORIGINS: list[str] = ["*"]

    # Database Configuration
    REDIS_URL: str = "redis://localhost:6379"
    REDIS_CONNECT_TIMEOUT: float = 2.0
    POSTGRES_URL: str = "postgresql://localhost:5432/taskdash"  # Assumes a local Postgres db named 'taskdash' exists

    TASK_STORE_BACKEND: Literal["redis", "postgres", "memory"] = "redis"
    TASK_STORE_NAMESPACE: str = "tasks"

    SEED_SAMPLE_TASKS: bool = True

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("TASK_STORE_BACKEND", mode="before")
    def normalize_backend(cls, v: Any):
        if isinstance(v, str):
            return v.strip().lower()
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
