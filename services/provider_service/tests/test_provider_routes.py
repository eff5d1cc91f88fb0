"""
Tests for provider landing page, static files and error handling
"""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from services.provider_service import create_provider_app
from shared.utils.settings import DEFAULT_STATIC_DIR


def test_root_serves_provider_page(client, profile):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text == f"<h1>{profile.key} console</h1>"


def test_static_asset_is_served(client, profile):
    response = client.get("/assets/logo.svg")

    assert response.status_code == 200
    assert profile.key in response.text


def test_root_answers_head(client):
    response = client.head("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")


def test_packaged_page_stylesheet_resolves_in_provider_tree(profile, provider_settings):
    settings = provider_settings.model_copy(update={"static_dir": DEFAULT_STATIC_DIR})
    client = TestClient(create_provider_app(profile, settings))

    page = client.get("/")
    stylesheet = client.get("/styles.css")

    assert 'href="styles.css"' in page.text
    assert stylesheet.status_code == 200
    assert stylesheet.headers["content-type"].startswith("text/css")


@pytest.mark.parametrize("path", ["/unknown", "/api/unknown", "/assets/missing.png"])
def test_unknown_path_returns_not_found(client, profile, path):
    response = client.get(path)

    assert response.status_code == 404
    assert response.json() == {
        "error": "Not Found",
        "service": f"{profile.key}-service",
        "path": path,
    }


def test_wrong_method_returns_not_found(client):
    response = client.post("/api/info", json={})

    assert response.status_code == 404
    assert response.json()["path"] == "/api/info"


def test_missing_static_tree_keeps_api_routes(profile, provider_settings, tmp_path):
    settings = provider_settings.model_copy(update={"static_dir": tmp_path / "nothing"})
    client = TestClient(create_provider_app(profile, settings))

    assert client.get("/").status_code == 404
    assert client.get("/api/info").status_code == 200


def test_unhandled_error_returns_internal_error(profile, provider_settings, monkeypatch):
    def broken_clock() -> float:
        raise RuntimeError("clock unavailable")

    monkeypatch.setattr("services.provider_service.routes.health.process_uptime", broken_clock)
    client = TestClient(create_provider_app(profile, provider_settings), raise_server_exceptions=False)

    response = client.get("/health")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Internal Server Error",
        "service": f"{profile.key}-service",
        "message": "clock unavailable",
    }


@pytest.mark.asyncio
async def test_concurrent_requests_are_independent(profile, provider_settings):
    app = create_provider_app(profile, provider_settings)
    paths = [f"/missing/{n}" for n in range(25)] + ["/api/info"] * 5

    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://provider") as client:
        responses = await asyncio.gather(*(client.get(path) for path in paths))

    for path, response in zip(paths, responses):
        if path == "/api/info":
            assert response.status_code == 200
        else:
            assert response.json()["path"] == path


def test_module_entrypoints_build_apps():
    from services.aws_service.main import app as aws_app
    from services.azure_service.main import app as azure_app
    from services.gcp_service.main import app as gcp_app

    for app, service_id in ((aws_app, "aws-service"), (azure_app, "azure-service"), (gcp_app, "gcp-service")):
        assert TestClient(app).get("/health").json()["service"] == service_id
