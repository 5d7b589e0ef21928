import asyncio
import logging
from typing import Callable, Optional

from src.commands.interfaces.command import Command
from src.commands.interfaces.command_context import (
    ExecuteCommandContext,
    UpdateStateContext,
)
from src.commands.interfaces.command_result import CommandResult
from src.config.constants import (
    FAILED_TO_OPEN_URL_PREFIX,
    SERVICE_URL_NOT_FOUND_MESSAGE,
)
from src.config.launcher import get_url_launcher
from src.config.url_command_options import UrlCommandOptions
from src.core.launcher.interface import UrlLauncher
from src.core.resources.interface import ResourceWithEndpoints
from src.models.types import CommandState, HealthStatus, IconVariant
from src.util.icon_names import format_icon_name

logger = logging.getLogger(__name__)


class UrlCommand(Command):
    """
    Context menu command that opens a URL for a resource.

    The URL is either used as-is or appended to the resource's secure
    endpoint. The command is enabled only while the resource reports
    Healthy.
    """

    def __init__(
        self,
        resource: ResourceWithEndpoints,
        name: str,
        display_name: str,
        url: str,
        options: Optional[UrlCommandOptions] = None,
        launcher_provider: Optional[Callable[[], UrlLauncher]] = None,
    ):
        super().__init__()
        if not name:
            raise ValueError("name is required")
        if not display_name:
            raise ValueError("display_name is required")
        if not url:
            raise ValueError("url is required")

        self._resource = resource
        self._name = name
        self._display_name = display_name
        self._url = url
        self._options = options or UrlCommandOptions()
        self._icon_name = format_icon_name(self._options.icon_name)
        self._launcher_provider = launcher_provider or get_url_launcher

    @property
    def url(self) -> str:
        return self._url

    @property
    def options(self) -> UrlCommandOptions:
        return self._options

    def get_command_name(self) -> str:
        return self._name

    def get_display_name(self) -> str:
        return self._display_name

    def get_icon_name(self) -> str:
        return self._icon_name

    def get_icon_variant(self) -> IconVariant:
        return self._options.icon_variant

    def resolve_url(self) -> Optional[str]:
        """
        Compute the URL to open.

        Returns:
            The final URL, or None when the resource's endpoint cannot be
            resolved
        """
        if not self._options.append_to_service_url:
            return self._url

        endpoint = self._resource.get_endpoint(self._options.endpoint_name)
        if endpoint is None or endpoint.url is None:
            return None

        return f"{endpoint.url}/{self._url}"

    async def execute(self, context: ExecuteCommandContext) -> CommandResult:
        """Open the command's URL with the configured launcher"""
        try:
            final_url = self.resolve_url()
            if final_url is None:
                logger.warning(
                    f"Endpoint '{self._options.endpoint_name}' not found "
                    f"for resource '{context.resource_name}'"
                )
                return CommandResult.failure(SERVICE_URL_NOT_FOUND_MESSAGE)

            launcher = self._launcher_provider()
            await asyncio.to_thread(launcher.open, final_url)

            logger.info(f"Opened {final_url} for resource '{context.resource_name}'")
            return CommandResult.ok()

        except Exception as e:
            logger.error(
                f"Command '{self._name}' failed for resource "
                f"'{context.resource_name}': {str(e)}",
                exc_info=True,
            )
            return CommandResult.failure(f"{FAILED_TO_OPEN_URL_PREFIX}{str(e)}")

    def update_state(self, context: UpdateStateContext) -> CommandState:
        if context.health_status == HealthStatus.HEALTHY:
            return CommandState.ENABLED
        return CommandState.DISABLED
