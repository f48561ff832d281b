from typing import Any, Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from src.config import Settings, get_settings
from src.main import app as main_app


@pytest.fixture
def settings_overrides() -> dict[str, Any]:
    return {}


@pytest.fixture
def test_settings(settings_overrides: dict[str, Any]) -> Settings:
    values: dict[str, Any] = {
        "APP_VERSION": "v-test",
        "ENVIRONMENT": "test",
        "SEED_SAMPLE_TASKS": False,
        **settings_overrides,
    }
    return Settings(_env_file=None, **values)  # type: ignore[call-arg]


@pytest.fixture
def test_app(test_settings: Settings, mocker: MockerFixture) -> Generator[FastAPI, None, None]:
    mocker.patch("src.main.settings", test_settings)
    main_app.dependency_overrides[get_settings] = lambda: test_settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as client:
        yield client
