"""API test fixtures: app with the controller dependency overridden."""

import pytest
from fastapi.testclient import TestClient

from infogenius.api.deps import get_infographic_service, get_storage_config
from infogenius.api.main import create_app
from infogenius.models.storage import StorageConfig, StorageSource


@pytest.fixture
def app(infographic_service, mock_uploader):
    # uploads are exercised in the controller tests
    mock_uploader.is_configured.return_value = False
    app = create_app()
    app.dependency_overrides[get_infographic_service] = lambda: infographic_service
    app.dependency_overrides[get_storage_config] = lambda: StorageConfig(
        is_configured=False, source=StorageSource.NONE
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)
