from typing import Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from taskdash.config import Settings
from taskdash.main import app as main_app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        TASK_STORE_BACKEND="memory",
        SEED_SAMPLE_TASKS=False,
        CORS_ENABLED=False,
    )


@pytest.fixture(autouse=True)
def patch_settings(test_settings: Settings, mocker: MockerFixture) -> None:
    mocker.patch("taskdash.main.settings", test_settings)


@pytest.fixture
def test_app() -> Generator[FastAPI, None, None]:
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as client:
        yield client
