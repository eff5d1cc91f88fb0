"""
Provider Service - Application Factory
Static health and catalog service behind the AWS, Azure and GCP stubs
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Type

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.utils import add_request_logging, get_logger, setup_logging
from shared.utils.settings import load_settings

from .config import ProviderSettings
from .profiles import ProviderProfile
from .routes import health, info

logger = get_logger(__name__)


def create_provider_app(profile: ProviderProfile, settings: ProviderSettings) -> FastAPI:
    """
    Create the FastAPI application for one provider

    Args:
        profile: Provider identity and catalog
        settings: Validated process settings

    Returns:
        FastAPI application serving health, catalog and static pages
    """
    site_dir = Path(settings.static_dir) / profile.key

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info(
            "Provider service running",
            service=profile.service_id,
            provider=profile.long_name,
            port=settings.port,
            region=settings.region or profile.default_region,
        )
        yield
        logger.info("Provider service shutdown complete", service=profile.service_id)

    app = FastAPI(
        title=f"Multi-Cloud Gateway - {profile.short_name} Service",
        description=f"Static health and service catalog for {profile.long_name}",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.profile = profile
    app.state.settings = settings

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
                    "service": profile.service_id,
                    "path": request.url.path,
                },
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "service": profile.service_id},
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
                "service": profile.service_id,
                "message": str(exc),
            },
        )

    app.include_router(health.router, tags=["Health"])
    app.include_router(info.router, tags=["Info"])

    @app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
    async def root():
        """Provider landing page"""
        index_file = site_dir / "index.html"
        if not index_file.is_file():
            raise StarletteHTTPException(status_code=404)
        return FileResponse(index_file)

    # Registered last so every explicit route wins over a same-named file
    if site_dir.is_dir():
        app.mount("/", StaticFiles(directory=site_dir, html=True), name="static")
    else:
        logger.warning("Static directory missing, serving API routes only", static_dir=str(site_dir))

    return app


def bootstrap_provider(profile: ProviderProfile, settings_class: Type[ProviderSettings]) -> FastAPI:
    """
    Load settings, configure logging and build the provider application

    Raises:
        SettingsLoadError: Raised when configuration validation fails
    """
    settings = load_settings(settings_class)
    setup_logging(
        service_name=profile.service_id,
        log_level=settings.log_level,
        log_format=settings.log_format,
        config_path=settings.logging_config_path,
    )
    return create_provider_app(profile, settings)


def serve(app: FastAPI) -> None:
    """Run a provider application on its configured host and port"""
    settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
