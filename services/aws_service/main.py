"""
Amazon Web Services stub service
"""

from services.provider_service import AWS_PROFILE, bootstrap_provider, serve
from services.provider_service.config import AWSServiceSettings

app = bootstrap_provider(AWS_PROFILE, AWSServiceSettings)


def main() -> None:
    serve(app)


if __name__ == "__main__":
    main()
