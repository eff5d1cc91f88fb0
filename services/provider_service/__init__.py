"""
Provider stub service shared by the AWS, Azure and GCP backends
"""

from .main import bootstrap_provider, create_provider_app, serve
from .profiles import AWS_PROFILE, AZURE_PROFILE, GCP_PROFILE, PROVIDER_PROFILES, ProviderProfile

__all__ = [
    "bootstrap_provider",
    "create_provider_app",
    "serve",
    "AWS_PROFILE",
    "AZURE_PROFILE",
    "GCP_PROFILE",
    "PROVIDER_PROFILES",
    "ProviderProfile",
]
