from dataclasses import dataclass
from typing import Optional

from src.models.types import HealthStatus


@dataclass
class ExecuteCommandContext:
    """
    Data handed to a command when a user triggers it from the dashboard.

    The host builds one context per click; commands must not keep a
    reference to it after execution finishes.
    """

    resource_name: str

    def __post_init__(self) -> None:
        """Validate context after initialization"""
        if not self.resource_name:
            raise ValueError("resource_name is required")


@dataclass
class UpdateStateContext:
    """
    Snapshot the host passes when it re-evaluates a command's state.

    A health_status of None means the host has not received a health
    report for the resource yet.
    """

    resource_name: str
    health_status: Optional[HealthStatus] = None
