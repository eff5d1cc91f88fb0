"""
Shared utilities for the multi-cloud gateway

This package contains common utilities used by the gateway and the provider
services.
"""

from .logger import setup_logging, get_logger
from .middleware import add_request_logging
from .uptime import process_uptime, utc_timestamp

__all__ = [
    "setup_logging",
    "get_logger",
    "add_request_logging",
    "process_uptime",
    "utc_timestamp",
]

__version__ = "1.0.0"
