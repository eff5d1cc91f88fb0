"""
Provider proxy routes
Forward /aws, /azure and /gcp traffic to the configured backends
"""

import httpx
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.background import BackgroundTask
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.utils import get_logger

from ..routing import RouteTable, resolve_route
from ..utils.proxy_client import filter_headers, without_cors_headers

logger = get_logger(__name__)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _inbound_path(request: Request) -> str:
    """Request path exactly as the client sent it, without the query"""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.split(b"?", 1)[0].decode("latin-1")
    return request.url.path


async def proxy_request(request: Request):
    """Relay one request to its provider backend and stream the answer back"""
    path = _inbound_path(request)
    route = resolve_route(request.app.state.route_table, path)
    if route is None:
        raise StarletteHTTPException(status_code=404)

    query = request.scope.get("query_string", b"").decode("latin-1")
    target_url = route.target_for(path, query)
    proxy_client = request.app.state.proxy_client

    try:
        upstream = await proxy_client.forward(
            method=request.method,
            url=target_url,
            headers=filter_headers(request.headers.raw, drop_host=True),
            content=await request.body(),
        )
    except httpx.TransportError as error:
        message = str(error) or error.__class__.__name__
        logger.error(
            f"{route.display_name} service proxy error",
            provider=route.provider,
            target=target_url,
            error=message,
        )
        return JSONResponse(
            status_code=503,
            content={
                "error": f"{route.display_name} service unavailable",
                "message": message,
            },
        )

    logger.debug(
        "Proxied request",
        provider=route.provider,
        method=request.method,
        target=target_url,
        status_code=upstream.status_code,
    )

    response = StreamingResponse(
        upstream.aiter_raw(),
        status_code=upstream.status_code,
        background=BackgroundTask(upstream.aclose),
    )
    response.raw_headers = without_cors_headers(filter_headers(upstream.headers.raw))
    return response


def create_proxy_router(route_table: RouteTable) -> APIRouter:
    """
    Create the router exposing one prefix route pair per provider

    Args:
        route_table: Ordered provider routes

    Returns:
        APIRouter matching each prefix and everything below it
    """
    router = APIRouter(tags=["Proxy"])
    for route in route_table:
        router.add_api_route(
            route.prefix,
            proxy_request,
            methods=PROXY_METHODS,
            include_in_schema=False,
        )
        router.add_api_route(
            f"{route.prefix}/{{forwarded_path:path}}",
            proxy_request,
            methods=PROXY_METHODS,
            include_in_schema=False,
        )
    return router
