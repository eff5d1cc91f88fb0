"""
Google Cloud Platform stub service
"""

from services.provider_service import GCP_PROFILE, bootstrap_provider, serve
from services.provider_service.config import GCPServiceSettings

app = bootstrap_provider(GCP_PROFILE, GCPServiceSettings)


def main() -> None:
    serve(app)


if __name__ == "__main__":
    main()
