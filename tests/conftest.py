from typing import Iterator

import pytest

from src.config.launcher import set_url_launcher
from src.core.launcher.memory import RecordingLauncher
from src.core.resources.catalog import ResourceCatalog
from src.core.resources.service_resource import ServiceResource
from src.models.types import HealthStatus


@pytest.fixture
def recording_launcher() -> RecordingLauncher:
    """Launcher that records opened URLs"""
    return RecordingLauncher()


@pytest.fixture
def failing_launcher() -> RecordingLauncher:
    """Launcher whose every launch fails"""
    return RecordingLauncher(fail_with="No application is associated with the URL")


@pytest.fixture
def process_launcher(recording_launcher: RecordingLauncher) -> Iterator[RecordingLauncher]:
    """Install a recording launcher as the process-wide launcher"""
    set_url_launcher(recording_launcher)
    yield recording_launcher
    set_url_launcher(None)


@pytest.fixture
def api_resource() -> ServiceResource:
    """Healthy resource exposing an https endpoint"""
    return ServiceResource(
        name="api",
        endpoints={"https": "https://host:1234", "http": "http://host:1233"},
        health_status=HealthStatus.HEALTHY,
    )


@pytest.fixture
def resource_catalog(api_resource: ServiceResource) -> ResourceCatalog:
    """Catalog holding the api resource"""
    catalog = ResourceCatalog()
    catalog.add(api_resource)
    return catalog
