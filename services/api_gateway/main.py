"""
API Gateway - Main Application
Single public entry point that path-routes traffic to the provider services
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.utils import add_request_logging, get_logger, setup_logging
from shared.utils.settings import load_settings

from .config import GatewaySettings
from .routes import health, proxy
from .routes.health import SERVICE_NAME
from .routing import build_route_table
from .utils.proxy_client import BackendProxyClient

logger = get_logger(__name__)


def create_gateway_app(
    settings: GatewaySettings,
    proxy_client: Optional[BackendProxyClient] = None,
) -> FastAPI:
    """
    Create the gateway application

    Routes are registered in precedence order: health, root page, provider
    prefixes, static files. Anything left answers with the not-found body.

    Args:
        settings: Validated gateway settings
        proxy_client: Client used to reach the backends; built from settings when omitted

    Returns:
        FastAPI application instance
    """
    route_table = build_route_table(settings)
    if proxy_client is None:
        proxy_client = BackendProxyClient(
            timeout=settings.proxy_timeout_seconds,
            connect_timeout=settings.proxy_connect_timeout_seconds,
        )
    static_dir = Path(settings.static_dir)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info("API Gateway running", port=settings.port)
        for route in route_table:
            logger.info("Proxying to service", provider=route.display_name, prefix=route.prefix, target=route.target_url)

        await proxy_client.start()

        yield

        await proxy_client.stop()
        logger.info("API Gateway shutdown complete")

    app = FastAPI(
        title="Multi-Cloud Gateway - API Gateway",
        description="Routes /aws, /azure and /gcp traffic to the provider services",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.route_table = route_table
    app.state.proxy_client = proxy_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    add_request_logging(app)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Unknown paths and unsupported methods answer as not found"""
        if exc.status_code in (404, 405):
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Not Found",
                    "path": request.url.path,
                    "message": "The requested resource was not found",
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            method=request.method,
            path=request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "message": str(exc),
            },
        )

    app.include_router(health.router, tags=["Health"])

    @app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
    async def root():
        """Gateway landing page"""
        index_file = static_dir / "index.html"
        if not index_file.is_file():
            raise StarletteHTTPException(status_code=404)
        return FileResponse(index_file)

    app.include_router(proxy.create_proxy_router(route_table))

    # Provider prefixes are matched above, so a file sharing a prefix is never served
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Static directory missing, serving API routes only", static_dir=str(static_dir))

    return app


def bootstrap_gateway() -> FastAPI:
    """
    Load settings, configure logging and build the gateway application

    Raises:
        SettingsLoadError: Raised when configuration validation fails
    """
    settings = load_settings(GatewaySettings)
    setup_logging(
        service_name=SERVICE_NAME,
        log_level=settings.log_level,
        log_format=settings.log_format,
        config_path=settings.logging_config_path,
    )
    return create_gateway_app(settings)


app = bootstrap_gateway()


def main() -> None:
    """Run the gateway on its configured host and port"""
    settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
