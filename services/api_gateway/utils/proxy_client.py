"""
Backend proxy client
HTTP client the gateway uses to forward requests to provider services

Connection pooling follows the shared-client pattern:
- Single AsyncClient initialized at app startup
- Limits to prevent connection exhaustion
- Per-request fallback start when the lifespan did not run
"""

from typing import Iterable, List, Optional, Tuple

import httpx

from shared.schemas import ComponentHealth, ComponentStatus
from shared.utils import get_logger

logger = get_logger(__name__)

# Headers that describe a single connection and never cross the proxy
HOP_BY_HOP_HEADERS = frozenset({
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "proxy-connection",
    "te",
    "trailer",
    "trailers",
    "transfer-encoding",
    "upgrade",
})

RawHeaders = List[Tuple[bytes, bytes]]


def filter_headers(raw_headers: Iterable[Tuple[bytes, bytes]], drop_host: bool = False) -> RawHeaders:
    """
    Strip hop-by-hop headers, keeping repeated headers and their order

    Args:
        raw_headers: Header name/value byte pairs
        drop_host: Also drop Host so the client derives it from the target URL

    Returns:
        Filtered header pairs with lowercase names
    """
    excluded = (HOP_BY_HOP_HEADERS | {"host"}) if drop_host else HOP_BY_HOP_HEADERS
    filtered = []
    for name, value in raw_headers:
        name = name.lower()
        if name.decode("latin-1") in excluded:
            continue
        filtered.append((name, value))
    return filtered


def without_cors_headers(raw_headers: RawHeaders) -> RawHeaders:
    """
    Drop a backend's CORS headers so the gateway's own CORS layer is the only source

    Access-Control-* headers are removed and the Origin token is taken out of
    Vary; a Vary header left empty is dropped.
    """
    relayed = []
    for name, value in raw_headers:
        if name.startswith(b"access-control-"):
            continue
        if name == b"vary":
            tokens = [token.strip() for token in value.split(b",")]
            tokens = [token for token in tokens if token and token.lower() != b"origin"]
            if not tokens:
                continue
            value = b", ".join(tokens)
        relayed.append((name, value))
    return relayed


class BackendProxyClient:
    """
    HTTP client for forwarding gateway traffic.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
        - If not started, the first request starts it
    """

    # Connection pool settings (per worker)
    MAX_CONNECTIONS = 100
    MAX_KEEPALIVE = 20
    KEEPALIVE_EXPIRY = 5.0

    HEALTH_CHECK_TIMEOUT = 5.0

    def __init__(
        self,
        timeout: float = 30.0,
        connect_timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.connect_timeout = connect_timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def started(self) -> bool:
        return self._client is not None

    async def start(self):
        """
        Initialize the shared HTTP client.
        Call this during FastAPI app startup via lifespan.
        """
        if self._client is not None:
            logger.warning("BackendProxyClient already started")
            return

        limits = httpx.Limits(
            max_connections=self.MAX_CONNECTIONS,
            max_keepalive_connections=self.MAX_KEEPALIVE,
            keepalive_expiry=self.KEEPALIVE_EXPIRY,
        )
        timeout = httpx.Timeout(self.timeout, connect=self.connect_timeout)

        self._client = httpx.AsyncClient(
            limits=limits,
            timeout=timeout,
            transport=self._transport,
            follow_redirects=False,
        )

        logger.info(
            "BackendProxyClient started",
            max_connections=self.MAX_CONNECTIONS,
            timeout=self.timeout,
            connect_timeout=self.connect_timeout,
        )

    async def stop(self):
        """
        Close the HTTP client and release resources.
        Call this during FastAPI app shutdown via lifespan.
        """
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("BackendProxyClient stopped")

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            logger.warning("BackendProxyClient not started, starting on first use")
            await self.start()
        return self._client

    async def forward(self, method: str, url: str, headers: RawHeaders, content: bytes) -> httpx.Response:
        """
        Send one request to a backend and return the unread, streaming response.

        The caller owns the response and must close it.

        Raises:
            httpx.TransportError: Connection refused, timeouts and protocol failures
        """
        client = await self._get_client()
        request = client.build_request(method, url, headers=headers, content=content)
        return await client.send(request, stream=True)

    async def check_backend(self, base_url: str) -> ComponentHealth:
        """Check whether a backend answers its /health endpoint"""
        client = await self._get_client()
        try:
            response = await client.get(f"{base_url}/health", timeout=self.HEALTH_CHECK_TIMEOUT)
        except httpx.TransportError as e:
            logger.warning("Backend health check failed", target=base_url, error=str(e))
            return ComponentHealth(
                status=ComponentStatus.UNREACHABLE,
                target=base_url,
                detail=str(e) or e.__class__.__name__,
            )

        if response.status_code == 200:
            return ComponentHealth(status=ComponentStatus.HEALTHY, target=base_url)
        return ComponentHealth(
            status=ComponentStatus.UNHEALTHY,
            target=base_url,
            detail=f"HTTP {response.status_code}",
        )
