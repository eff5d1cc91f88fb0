"""
Provider service configuration
One settings class per provider; the region field reads the provider's own variable
"""

from pydantic import Field

from shared.utils.settings import BaseServiceSettings


class ProviderSettings(BaseServiceSettings):
    """Settings common to every provider service"""

    region: str = Field(default="")


class AWSServiceSettings(ProviderSettings):
    port: int = Field(default=3001, ge=1, le=65535)
    region: str = Field(default="us-east-1", min_length=1, validation_alias="AWS_REGION")


class AzureServiceSettings(ProviderSettings):
    port: int = Field(default=3002, ge=1, le=65535)
    region: str = Field(default="eastus", min_length=1, validation_alias="AZURE_REGION")


class GCPServiceSettings(ProviderSettings):
    port: int = Field(default=3003, ge=1, le=65535)
    region: str = Field(default="us-central1", min_length=1, validation_alias="GCP_REGION")
