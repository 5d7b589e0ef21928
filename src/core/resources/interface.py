from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from src.commands.interfaces.command import Command


@dataclass(frozen=True)
class EndpointReference:
    """A named, resolvable network address exposed by a resource"""

    name: str
    url: Optional[str] = None


class ResourceWithEndpoints(ABC):
    """
    Capability interface for a dashboard resource that exposes endpoints and
    accepts context menu commands.

    Any host object providing these two operations can be used with
    add_url_command(); it does not need to derive from a concrete SDK type.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the resource as shown in the dashboard"""
        pass

    @abstractmethod
    def get_endpoint(self, endpoint_name: str) -> Optional[EndpointReference]:
        """
        Resolve a named endpoint of the resource

        Args:
            endpoint_name: Logical endpoint name (e.g., "https")

        Returns:
            EndpointReference, or None when the resource has no such endpoint
        """
        pass

    @abstractmethod
    def with_command(self, command: "Command") -> "ResourceWithEndpoints":
        """
        Register a command on the resource

        Args:
            command: Command to attach to the resource's context menu

        Returns:
            The same resource, for chaining
        """
        pass
