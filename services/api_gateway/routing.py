"""
Gateway route table
Ordered, immutable mapping from path prefix to provider backend
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from services.provider_service.profiles import PROVIDER_PROFILES

from .config import GatewaySettings


@dataclass(frozen=True)
class ProxyRoute:
    """One path prefix forwarded to one provider backend"""
    prefix: str
    provider: str
    display_name: str
    target_url: str

    def matches(self, path: str) -> bool:
        """True when the path is the prefix itself or lies below it"""
        return path == self.prefix or path.startswith(self.prefix + "/")

    def rewrite(self, path: str) -> str:
        """Drop the prefix; an empty remainder becomes the backend root"""
        return path[len(self.prefix):] or "/"

    def target_for(self, path: str, query: str = "") -> str:
        """Backend URL for an inbound path and raw query string"""
        url = f"{self.target_url}{self.rewrite(path)}"
        if query:
            url = f"{url}?{query}"
        return url


RouteTable = Tuple[ProxyRoute, ...]


def build_route_table(settings: GatewaySettings) -> RouteTable:
    """Route table for every known provider, in provider registration order"""
    return tuple(
        ProxyRoute(
            prefix=f"/{key}",
            provider=key,
            display_name=profile.short_name,
            target_url=settings.service_url(key),
        )
        for key, profile in PROVIDER_PROFILES.items()
    )


def resolve_route(route_table: RouteTable, path: str) -> Optional[ProxyRoute]:
    """First route whose prefix matches the path"""
    for route in route_table:
        if route.matches(path):
            return route
    return None
