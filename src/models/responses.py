from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from src.models.types import CommandState, HealthStatus, IconVariant


class CommandDescriptorResponse(BaseModel):
    name: str = Field(..., description="Command identifier, unique per resource")
    display_name: str
    icon_name: str
    icon_variant: IconVariant
    state: CommandState = Field(..., description="Current presentation state")


class ResourceResponse(BaseModel):
    name: str
    health_status: Optional[HealthStatus] = None
    endpoints: Dict[str, Optional[str]] = Field(default_factory=dict)
    commands: List[CommandDescriptorResponse] = Field(default_factory=list)


class ExecuteCommandResponse(BaseModel):
    """Response model for a command execution"""

    resource_name: str
    command_name: str
    success: bool
    error_message: Optional[str] = None
