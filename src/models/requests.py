from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from src.config.constants import DEFAULT_ICON_NAME
from src.models.types import HealthStatus, IconVariant


class HealthReportRequest(BaseModel):
    health_status: Optional[HealthStatus] = Field(
        ..., description="Latest health status of the resource (null when unknown)"
    )


class UrlCommandRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Command identifier, unique per resource")
    display_name: str = Field(..., min_length=1, description="Label shown in the dashboard")
    url: str = Field(
        ..., min_length=1, description="Path appended to the https endpoint, or an absolute URL"
    )
    icon_name: str = Field(DEFAULT_ICON_NAME, description="Catalog icon name")
    icon_variant: IconVariant = IconVariant.FILLED
    append_to_service_url: bool = True


class ResourceRequest(BaseModel):
    name: str = Field(..., min_length=1, description="Name of the resource")
    endpoints: Dict[str, Optional[str]] = Field(
        default_factory=dict, description="Endpoint URLs keyed by endpoint name"
    )
    health_status: Optional[HealthStatus] = None
    commands: List[UrlCommandRequest] = Field(default_factory=list)


class DashboardConfiguration(BaseModel):
    """Contents of the file named by DASHBOARD_RESOURCES_FILE"""

    resources: List[ResourceRequest] = Field(default_factory=list)
