"""
Shared data schemas for the multi-cloud gateway

This package contains the response schemas used across all services.
"""

from .health import (
    ComponentHealth,
    ComponentStatus,
    DetailedHealth,
    EndpointHealth,
    ProviderHealth,
    ServiceHealth,
)
from .catalog import CATALOG_CATEGORIES, InfoCatalog

__all__ = [
    "ComponentHealth",
    "ComponentStatus",
    "DetailedHealth",
    "EndpointHealth",
    "ProviderHealth",
    "ServiceHealth",
    "CATALOG_CATEGORIES",
    "InfoCatalog",
]

__version__ = "1.0.0"
