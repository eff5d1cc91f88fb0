"""
API Gateway configuration
Backend targets and proxy timeouts, read once at startup
"""

from pydantic import Field, field_validator

from shared.utils.settings import BaseServiceSettings


class GatewaySettings(BaseServiceSettings):
    """
    Gateway process settings

    Attributes:
        aws_service_url: Base URL of the AWS provider service
        azure_service_url: Base URL of the Azure provider service
        gcp_service_url: Base URL of the GCP provider service
        proxy_timeout_seconds: Overall timeout for one proxied request
        proxy_connect_timeout_seconds: Timeout for opening the backend connection
    """

    port: int = Field(default=3000, ge=1, le=65535)

    # Service URLs (container DNS names)
    aws_service_url: str = Field(default="http://aws-service:3001")
    azure_service_url: str = Field(default="http://azure-service:3002")
    gcp_service_url: str = Field(default="http://gcp-service:3003")

    proxy_timeout_seconds: float = Field(default=30.0, gt=0)
    proxy_connect_timeout_seconds: float = Field(default=5.0, gt=0)

    @field_validator("aws_service_url", "azure_service_url", "gcp_service_url")
    @classmethod
    def validate_service_url(cls, v: str) -> str:
        url = v.strip().rstrip("/")
        if not url.startswith(("http://", "https://")):
            raise ValueError(f"service URL must start with http:// or https://: {v!r}")
        return url

    def service_url(self, provider: str) -> str:
        """Configured backend base URL for a provider key"""
        return getattr(self, f"{provider}_service_url")
