"""
Health check routes for the API gateway
"""

import asyncio

from fastapi import APIRouter, Request

from shared.schemas import ComponentStatus, DetailedHealth, ServiceHealth
from shared.utils import process_uptime, utc_timestamp

SERVICE_NAME = "api-gateway"

# Express-style routing: HEAD mirrors GET and one trailing slash is tolerated
READ_METHODS = ["GET", "HEAD"]

router = APIRouter()


@router.api_route("/health", methods=READ_METHODS, response_model=ServiceHealth)
@router.api_route("/health/", methods=READ_METHODS, response_model=ServiceHealth, include_in_schema=False)
async def health_check():
    """Gateway liveness; never depends on the backends"""
    return ServiceHealth(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=utc_timestamp(),
        uptime=process_uptime(),
    )


@router.api_route("/health/detailed", methods=READ_METHODS, response_model=DetailedHealth)
@router.api_route("/health/detailed/", methods=READ_METHODS, response_model=DetailedHealth, include_in_schema=False)
async def detailed_health_check(request: Request):
    """Gateway liveness plus reachability of every provider backend"""
    route_table = request.app.state.route_table
    proxy_client = request.app.state.proxy_client

    results = await asyncio.gather(*(proxy_client.check_backend(route.target_url) for route in route_table))
    components = {route.provider: result for route, result in zip(route_table, results)}

    overall = "healthy"
    if any(component.status != ComponentStatus.HEALTHY for component in components.values()):
        overall = "degraded"

    return DetailedHealth(
        status=overall,
        service=SERVICE_NAME,
        timestamp=utc_timestamp(),
        uptime=process_uptime(),
        components=components,
    )
