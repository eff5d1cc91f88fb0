"""
Service catalog route
"""

from fastapi import APIRouter, Request

from shared.schemas import InfoCatalog

from .health import READ_METHODS

router = APIRouter()


@router.api_route("/api/info", methods=READ_METHODS, response_model=InfoCatalog)
@router.api_route("/api/info/", methods=READ_METHODS, response_model=InfoCatalog, include_in_schema=False)
async def service_info(request: Request):
    """Constant catalog of the provider's cloud services"""
    return request.app.state.profile.catalog
