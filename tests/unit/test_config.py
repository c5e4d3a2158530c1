from taskdash.config import Settings


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)  # type: ignore

    assert settings.PORT == 5000
    assert settings.REDIS_URL == "redis://localhost:6379"
    assert settings.REDIS_CONNECT_TIMEOUT == 2.0
    assert settings.TASK_STORE_BACKEND == "redis"
    assert settings.CORS_ORIGINS == ["*"]


def test_settings_normalizes_values() -> None:
    settings = Settings(
        LOG_LEVEL="debug",  # type: ignore
        TASK_STORE_BACKEND=" Postgres ",  # type: ignore
        CORS_ORIGINS="http://localhost:5173, http://localhost:3000",  # type: ignore
    )

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.TASK_STORE_BACKEND == "postgres"
    assert settings.CORS_ORIGINS == ["http://localhost:5173", "http://localhost:3000"]
