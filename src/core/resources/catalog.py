import logging
from typing import Dict, List

from src.core.resources.service_resource import ServiceResource

logger = logging.getLogger(__name__)


class ResourceCatalog:
    """Resources known to the dashboard, keyed by name"""

    def __init__(self) -> None:
        self._resources: Dict[str, ServiceResource] = {}

    def add(self, resource: ServiceResource) -> ServiceResource:
        """
        Add a resource to the catalog

        Raises:
            ValueError: If a resource with the same name already exists
        """
        if resource.name in self._resources:
            raise ValueError(f"Resource '{resource.name}' already exists")
        self._resources[resource.name] = resource
        logger.info(f"Added resource '{resource.name}' to the catalog")
        return resource

    def get(self, name: str) -> ServiceResource:
        """
        Get a resource by name

        Raises:
            KeyError: If the resource is not in the catalog
        """
        if name not in self._resources:
            raise KeyError(f"Resource '{name}' not found")
        return self._resources[name]

    def list(self) -> List[ServiceResource]:
        return list(self._resources.values())

    def clear(self) -> None:
        self._resources.clear()
