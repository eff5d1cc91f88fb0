"""
Catalog Schemas
Static service catalog published by each provider service
"""

from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Category keys every provider catalog carries, in display order
CATALOG_CATEGORIES: Tuple[str, ...] = (
    "compute",
    "networking",
    "data",
    "security",
    "cicd",
    "observability",
)


class InfoCatalog(BaseModel):
    """Provider service catalog returned by /api/info"""
    model_config = ConfigDict(frozen=True)

    provider: str = Field(..., min_length=1, description="Short provider name")
    services: Dict[str, List[str]] = Field(..., description="Service names per category")
    features: List[str] = Field(default_factory=list)

    @field_validator("services")
    @classmethod
    def validate_categories(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        if set(v) != set(CATALOG_CATEGORIES):
            raise ValueError(f"catalog categories must be exactly {', '.join(CATALOG_CATEGORIES)}")
        # keep the declared category order regardless of input order
        return {category: list(v[category]) for category in CATALOG_CATEGORIES}
