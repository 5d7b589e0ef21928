import logging
from typing import Any, Dict, List, Optional

from src.commands.interfaces.command import Command
from src.commands.interfaces.command_context import UpdateStateContext
from src.commands.registry.command_registry import CommandRegistry
from src.core.resources.interface import EndpointReference, ResourceWithEndpoints
from src.models.types import HealthStatus

logger = logging.getLogger(__name__)


class ServiceResource(ResourceWithEndpoints):
    """
    In-process dashboard resource with named endpoints, a health snapshot
    and a registry of context menu commands.
    """

    def __init__(
        self,
        name: str,
        endpoints: Optional[Dict[str, Optional[str]]] = None,
        health_status: Optional[HealthStatus] = None,
    ):
        if not name:
            raise ValueError("name is required")

        self._name = name
        self._endpoints: Dict[str, EndpointReference] = {
            endpoint_name: EndpointReference(name=endpoint_name, url=url)
            for endpoint_name, url in (endpoints or {}).items()
        }
        self._health_status = health_status
        self._commands = CommandRegistry(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def health_status(self) -> Optional[HealthStatus]:
        return self._health_status

    @property
    def commands(self) -> CommandRegistry:
        return self._commands

    def get_endpoint(self, endpoint_name: str) -> Optional[EndpointReference]:
        return self._endpoints.get(endpoint_name)

    def list_endpoints(self) -> Dict[str, Optional[str]]:
        """Endpoint URLs keyed by endpoint name"""
        return {name: endpoint.url for name, endpoint in self._endpoints.items()}

    def with_endpoint(self, endpoint_name: str, url: Optional[str]) -> "ServiceResource":
        """Add or replace a named endpoint"""
        self._endpoints[endpoint_name] = EndpointReference(name=endpoint_name, url=url)
        return self

    def with_command(self, command: Command) -> "ServiceResource":
        self._commands.add_command(command)
        logger.info(
            f"Added command '{command.get_command_name()}' to resource '{self._name}'"
        )
        return self

    def report_health(self, health_status: Optional[HealthStatus]) -> None:
        """Record the latest health report for the resource"""
        if health_status != self._health_status:
            logger.info(
                f"Resource '{self._name}' health changed: "
                f"{self._health_status} -> {health_status}"
            )
        self._health_status = health_status

    def snapshot(self) -> UpdateStateContext:
        """Build the state context handed to command state callbacks"""
        return UpdateStateContext(
            resource_name=self._name, health_status=self._health_status
        )

    def describe_commands(self) -> List[Dict[str, Any]]:
        """Descriptors of all commands with their current state"""
        context = self.snapshot()
        return [
            self._commands.get_command_info(command_name, context)
            for command_name in self._commands.get_available_commands()
        ]
