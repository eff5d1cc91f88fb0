"""
Process clock helpers used by the health endpoints
"""

import time
from datetime import datetime, timezone

# Captured once when the first service module is imported
PROCESS_STARTED_AT = time.monotonic()


def process_uptime() -> float:
    """Seconds elapsed since process start, never decreasing"""
    return time.monotonic() - PROCESS_STARTED_AT


def utc_timestamp() -> str:
    """Current UTC time as an ISO 8601 string"""
    return datetime.now(timezone.utc).isoformat()
