"""
Health Schemas
Pydantic schemas for the liveness payloads returned by every service
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class ComponentStatus(str, Enum):
    """Backend reachability as seen from the gateway"""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNREACHABLE = "unreachable"


class ServiceHealth(BaseModel):
    """Liveness payload of the gateway"""
    status: str = Field(default="healthy")
    service: str
    timestamp: str = Field(..., description="ISO 8601 UTC time of the response")
    uptime: float = Field(..., ge=0, description="Seconds since process start")


class ProviderHealth(BaseModel):
    """Liveness payload of a provider service"""
    status: str = Field(default="healthy")
    service: str
    provider: str
    timestamp: str
    uptime: float = Field(..., ge=0)
    region: str


class EndpointHealth(BaseModel):
    """Minimal marker returned by the api and web health endpoints"""
    status: str = Field(default="ok")
    service: str
    message: str
    timestamp: str


class ComponentHealth(BaseModel):
    """Result of probing one provider backend"""
    status: ComponentStatus
    target: str
    detail: Optional[str] = None


class DetailedHealth(ServiceHealth):
    """Gateway liveness payload with per-provider reachability"""
    components: Dict[str, ComponentHealth] = Field(default_factory=dict)
