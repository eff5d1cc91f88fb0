"""
Microsoft Azure stub service
"""

from services.provider_service import AZURE_PROFILE, bootstrap_provider, serve
from services.provider_service.config import AzureServiceSettings

app = bootstrap_provider(AZURE_PROFILE, AzureServiceSettings)


def main() -> None:
    serve(app)


if __name__ == "__main__":
    main()
