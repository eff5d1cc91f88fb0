"""
Pytest fixtures for API gateway tests
"""

from typing import Callable, Dict, Optional

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from services.api_gateway.config import GatewaySettings
from services.api_gateway.main import create_gateway_app
from services.api_gateway.utils.proxy_client import BackendProxyClient
from services.provider_service import AWS_PROFILE, AZURE_PROFILE, GCP_PROFILE, create_provider_app
from services.provider_service.config import AWSServiceSettings, AzureServiceSettings, GCPServiceSettings

AWS_URL = "http://aws.test:3001"
AZURE_URL = "http://azure.test:3002"
GCP_URL = "http://gcp.test:3003"


@pytest.fixture
def static_dir(tmp_path):
    """Static tree with a root page, an asset and a file shadowing a provider prefix"""
    root = tmp_path / "static"
    (root / "assets").mkdir(parents=True)
    for key in ("aws", "azure", "gcp"):
        (root / key).mkdir()
        (root / key / "index.html").write_text(f"<h1>{key} landing</h1>")
    (root / "index.html").write_text("<h1>Gateway landing</h1>")
    (root / "assets" / "app.css").write_text("body { margin: 0; }")
    return root


@pytest.fixture
def gateway_settings(static_dir) -> GatewaySettings:
    return GatewaySettings(
        aws_service_url=AWS_URL,
        azure_service_url=AZURE_URL,
        gcp_service_url=GCP_URL,
        static_dir=static_dir,
    )


@pytest.fixture
def provider_apps(static_dir) -> Dict[str, FastAPI]:
    """In-process provider services keyed by the host the gateway targets"""
    return {
        "aws.test": create_provider_app(AWS_PROFILE, AWSServiceSettings(static_dir=static_dir)),
        "azure.test": create_provider_app(AZURE_PROFILE, AzureServiceSettings(static_dir=static_dir)),
        "gcp.test": create_provider_app(GCP_PROFILE, GCPServiceSettings(static_dir=static_dir)),
    }


@pytest.fixture
def dispatching_transport():
    """Factory for transports that route each outbound request to the provider app for its host"""

    def _build(apps: Dict[str, FastAPI], down: tuple = ()) -> httpx.MockTransport:
        transports = {host: httpx.ASGITransport(app=app) for host, app in apps.items()}

        async def handler(request: httpx.Request):
            transport = transports.get(request.url.host)
            if transport is None or request.url.host in down:
                raise httpx.ConnectError("Connection refused", request=request)
            return await transport.handle_async_request(request)

        return httpx.MockTransport(handler)

    return _build


@pytest.fixture
def echo_transport() -> httpx.MockTransport:
    """Backend double that answers with a description of the request it received"""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            201,
            headers={"x-backend": request.url.host, "set-cookie": "a=1"},
            json={
                "method": request.method,
                "host": request.url.host,
                "path": request.url.raw_path.decode("ascii"),
                "headers": {k.lower(): v for k, v in request.headers.items()},
                "body": request.content.decode("utf-8"),
            },
        )

    return httpx.MockTransport(handler)


@pytest.fixture
def make_gateway(gateway_settings) -> Callable[..., TestClient]:
    """Build a gateway test client whose backends are served by the given transport"""

    def _make(transport: httpx.AsyncBaseTransport, settings: Optional[GatewaySettings] = None, **client_kwargs) -> TestClient:
        proxy_client = BackendProxyClient(transport=transport)
        app = create_gateway_app(settings or gateway_settings, proxy_client=proxy_client)
        return TestClient(app, **client_kwargs)

    return _make
