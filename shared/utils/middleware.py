"""
Request logging middleware shared by every service

Emits one structured line per request with the fields of an access log in
"combined" format.
"""

import time

from fastapi import FastAPI, Request

from .logger import get_logger

logger = get_logger("multicloud.requests")


def add_request_logging(app: FastAPI) -> None:
    """
    Register the request logging middleware on an application

    Args:
        app: FastAPI application to instrument
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all completed requests"""
        started = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - started

        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            query=request.url.query or None,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 3),
            client_ip=request.client.host if request.client else "unknown",
            user_agent=request.headers.get("user-agent"),
            referer=request.headers.get("referer"),
        )

        return response
