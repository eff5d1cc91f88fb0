"""
Provider profiles
Identity, defaults and the constant service catalog of each provider stub
"""

from dataclasses import dataclass
from typing import Dict

from shared.schemas import InfoCatalog


@dataclass(frozen=True)
class ProviderProfile:
    """Everything that distinguishes one provider service from another"""
    key: str
    short_name: str
    long_name: str
    default_region: str
    catalog: InfoCatalog

    @property
    def service_id(self) -> str:
        return f"{self.key}-service"

    @property
    def api_service_id(self) -> str:
        return f"{self.key}-api"

    @property
    def web_service_id(self) -> str:
        return f"{self.key}-web"


AWS_PROFILE = ProviderProfile(
    key="aws",
    short_name="AWS",
    long_name="Amazon Web Services",
    default_region="us-east-1",
    catalog=InfoCatalog(
        provider="AWS",
        services={
            "compute": ["ECS Fargate", "EKS", "Lambda", "EC2 Auto Scaling"],
            "networking": ["VPC", "ALB/NLB", "API Gateway", "Route 53", "CloudFront"],
            "data": ["DynamoDB", "RDS", "ElastiCache", "S3", "OpenSearch"],
            "security": ["IAM", "KMS", "WAF", "Secrets Manager", "SSO"],
            "cicd": ["CodePipeline", "CodeBuild", "GitHub Actions", "ArgoCD"],
            "observability": ["CloudWatch", "Prometheus", "Grafana", "X-Ray", "PagerDuty"],
        },
        features=["Infrastructure as Code", "CI/CD Pipelines", "Observability"],
    ),
)

AZURE_PROFILE = ProviderProfile(
    key="azure",
    short_name="Azure",
    long_name="Microsoft Azure",
    default_region="eastus",
    catalog=InfoCatalog(
        provider="Azure",
        services={
            "compute": ["AKS", "App Service", "Functions", "VM Scale Sets"],
            "networking": ["VNets", "App Gateway", "API Management", "Front Door", "Traffic Manager"],
            "data": ["Cosmos DB", "Azure SQL", "Redis Cache", "Blob Storage", "Synapse"],
            "security": ["Entra ID (AAD)", "Key Vault", "Defender for Cloud", "RBAC", "Policy"],
            "cicd": ["Azure DevOps Pipelines", "GitHub Actions", "ArgoCD"],
            "observability": ["Azure Monitor", "Log Analytics", "Grafana", "App Insights"],
        },
        features=["Infrastructure as Code", "CI/CD Pipelines", "Observability"],
    ),
)

GCP_PROFILE = ProviderProfile(
    key="gcp",
    short_name="GCP",
    long_name="Google Cloud Platform",
    default_region="us-central1",
    catalog=InfoCatalog(
        provider="GCP",
        services={
            "compute": ["GKE", "Cloud Run", "Compute Engine", "Cloud Functions"],
            "networking": ["VPC", "Cloud Load Balancing", "Cloud Armor", "API Gateway", "Cloud CDN"],
            "data": ["BigQuery", "Cloud SQL", "Firestore", "Memorystore", "Cloud Storage"],
            "security": ["IAM", "Cloud KMS", "Security Command Center", "Policy Controller"],
            "cicd": ["Cloud Build", "Spinnaker", "GitHub Actions", "ArgoCD"],
            "observability": ["Cloud Monitoring", "Logging", "Trace", "Error Reporting"],
        },
        features=["Infrastructure as Code", "CI/CD Pipelines", "SRE Best Practices"],
    ),
)

PROVIDER_PROFILES: Dict[str, ProviderProfile] = {
    profile.key: profile for profile in (AWS_PROFILE, AZURE_PROFILE, GCP_PROFILE)
}
