import logging
import os

from src.commands.executor.command_executor import CommandExecutor
from src.config.constants import DEFAULT_COMMAND_TIMEOUT_SECONDS
from src.core.resources.catalog import ResourceCatalog
from src.core.resources.service_resource import ServiceResource
from src.extensions.url_commands import add_url_command
from src.models.requests import (
    DashboardConfiguration,
    ResourceRequest,
    UrlCommandRequest,
)

logger = logging.getLogger(__name__)

# Initialize shared dashboard state at module level
resource_catalog = ResourceCatalog()

command_executor = CommandExecutor(
    default_timeout_seconds=float(
        os.environ.get("COMMAND_TIMEOUT_SECONDS", DEFAULT_COMMAND_TIMEOUT_SECONDS)
    )
)


def get_resource_catalog() -> ResourceCatalog:
    """Get the resources shown in the dashboard"""
    return resource_catalog


def get_command_executor() -> CommandExecutor:
    """Get the executor used for command clicks"""
    return command_executor


def add_command_from_request(
    resource: ServiceResource, request: UrlCommandRequest
) -> ServiceResource:
    """Add a URL command described by an API request or configuration entry"""
    return add_url_command(
        resource,
        name=request.name,
        display_name=request.display_name,
        url=request.url,
        icon_name=request.icon_name,
        icon_variant=request.icon_variant,
        append_to_service_url=request.append_to_service_url,
    )


def register_resource(
    catalog: ResourceCatalog, request: ResourceRequest
) -> ServiceResource:
    """
    Build a resource with its URL commands and add it to the catalog.

    The resource is only added once all of its commands registered.

    Raises:
        ValueError: On a duplicate resource or command name
    """
    resource = ServiceResource(
        name=request.name,
        endpoints=request.endpoints,
        health_status=request.health_status,
    )
    for command_request in request.commands:
        add_command_from_request(resource, command_request)

    return catalog.add(resource)


def load_resources_file(path: str, catalog: ResourceCatalog) -> int:
    """
    Register the resources listed in a JSON configuration file.

    Args:
        path: File containing a DashboardConfiguration document
        catalog: Catalog receiving the resources

    Returns:
        Number of resources registered
    """
    with open(path, "r", encoding="utf-8") as f:
        configuration = DashboardConfiguration.model_validate_json(f.read())

    for resource_request in configuration.resources:
        register_resource(catalog, resource_request)

    logger.info(f"Registered {len(configuration.resources)} resources from {path}")
    return len(configuration.resources)
