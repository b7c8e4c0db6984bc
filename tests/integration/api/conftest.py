"""API test fixtures: an app wired to the in-memory test data set."""

import pytest
from fastapi.testclient import TestClient

from tests.shared.fixtures.factories import (
    StaticSourceFactory,
    TestRecordSourceFactory,
)
from wastekpi.presentation.api.app import API_V1_PREFIX, create_app
from wastekpi.presentation.api.dependencies import get_source_factory
from wastekpi_config import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def settings() -> Settings:
    return Settings(default_year_month="2024-04", default_trend_months=6)


@pytest.fixture
def app(settings):
    app = create_app(settings)
    source = TestRecordSourceFactory.default()
    app.dependency_overrides[get_source_factory] = lambda: StaticSourceFactory(source)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(app) -> TestClient:
    return TestClient(app)
