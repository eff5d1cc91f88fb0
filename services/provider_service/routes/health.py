"""
Health check routes for provider services
"""

from fastapi import APIRouter, Request

from shared.schemas import EndpointHealth, ProviderHealth
from shared.utils import process_uptime, utc_timestamp

# Express-style routing: HEAD mirrors GET and one trailing slash is tolerated
READ_METHODS = ["GET", "HEAD"]

router = APIRouter()


@router.api_route("/health", methods=READ_METHODS, response_model=ProviderHealth)
@router.api_route("/health/", methods=READ_METHODS, response_model=ProviderHealth, include_in_schema=False)
async def health_check(request: Request):
    """Service liveness with provider identity and region"""
    profile = request.app.state.profile
    settings = request.app.state.settings
    return ProviderHealth(
        status="healthy",
        service=profile.service_id,
        provider=profile.long_name,
        timestamp=utc_timestamp(),
        uptime=process_uptime(),
        region=settings.region or profile.default_region,
    )


@router.api_route("/api/health", methods=READ_METHODS, response_model=EndpointHealth)
@router.api_route("/api/health/", methods=READ_METHODS, response_model=EndpointHealth, include_in_schema=False)
async def api_health_check(request: Request):
    profile = request.app.state.profile
    return EndpointHealth(
        status="ok",
        service=profile.api_service_id,
        message=f"{profile.short_name} API is running",
        timestamp=utc_timestamp(),
    )


@router.api_route("/web/health", methods=READ_METHODS, response_model=EndpointHealth)
@router.api_route("/web/health/", methods=READ_METHODS, response_model=EndpointHealth, include_in_schema=False)
async def web_health_check(request: Request):
    profile = request.app.state.profile
    return EndpointHealth(
        status="ok",
        service=profile.web_service_id,
        message=f"{profile.short_name} Web service is running",
        timestamp=utc_timestamp(),
    )
