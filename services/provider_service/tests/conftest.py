"""
Pytest fixtures for provider service tests
"""

import pytest
from fastapi.testclient import TestClient

from services.provider_service import AWS_PROFILE, AZURE_PROFILE, GCP_PROFILE, create_provider_app
from services.provider_service.config import AWSServiceSettings, AzureServiceSettings, GCPServiceSettings

SETTINGS_CLASSES = {
    "aws": AWSServiceSettings,
    "azure": AzureServiceSettings,
    "gcp": GCPServiceSettings,
}


@pytest.fixture
def static_dir(tmp_path):
    root = tmp_path / "static"
    for key in SETTINGS_CLASSES:
        (root / key / "assets").mkdir(parents=True)
        (root / key / "index.html").write_text(f"<h1>{key} console</h1>")
        (root / key / "assets" / "logo.svg").write_text(f"<svg id='{key}'/>")
    return root


@pytest.fixture(params=[AWS_PROFILE, AZURE_PROFILE, GCP_PROFILE], ids=lambda profile: profile.key)
def profile(request):
    """Every test using this fixture runs once per provider"""
    return request.param


@pytest.fixture
def provider_settings(profile, static_dir, monkeypatch):
    monkeypatch.delenv(f"{profile.key.upper()}_REGION", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    return SETTINGS_CLASSES[profile.key](_env_file=None, static_dir=static_dir)


@pytest.fixture
def client(profile, provider_settings):
    with TestClient(create_provider_app(profile, provider_settings)) as test_client:
        yield test_client
