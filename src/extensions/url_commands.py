"""
Helpers for adding URL commands to dashboard resources.

Each command opens a URL from the resource's context menu and shows an icon
from the Fluent UI System Icons set (https://fluenticons.co/). Icon names are
formatted automatically, so "document table" and "Document Table" both
become "DocumentTable".

Add a command relative to the resource's https endpoint:

    add_url_command(
        service,
        name="swagger-docs",
        display_name="Swagger Documentation",
        url="swagger",
        icon_name="Document Table",
        icon_variant=IconVariant.REGULAR,
    )

Add a command with an absolute URL:

    add_url_command(
        service,
        name="external-docs",
        display_name="External Documentation",
        url="https://docs.example.com",
        icon_name="Document Text",
        append_to_service_url=False,
    )
"""

import logging
from typing import Callable, Optional, TypeVar

from src.commands.impl.url_command import UrlCommand
from src.config.constants import DEFAULT_ICON_NAME
from src.config.url_command_options import UrlCommandOptions
from src.core.launcher.interface import UrlLauncher
from src.core.resources.interface import ResourceWithEndpoints
from src.models.types import IconVariant

logger = logging.getLogger(__name__)

TResource = TypeVar("TResource", bound=ResourceWithEndpoints)


def add_url_command(
    service: TResource,
    name: str,
    display_name: str,
    url: str,
    icon_name: str = DEFAULT_ICON_NAME,
    icon_variant: IconVariant = IconVariant.FILLED,
    append_to_service_url: bool = True,
) -> TResource:
    """
    Add a URL-opening command to a resource's dashboard context menu.

    Args:
        service: Resource to add the command to
        name: Identifier for the command, unique per resource
        display_name: Label shown in the dashboard
        url: Path appended to the resource's https endpoint, or an absolute URL
        icon_name: Catalog icon name (spaces are removed, words capitalized)
        icon_variant: Regular (outlined) or Filled icon
        append_to_service_url: If True, append url to the resource's https
            endpoint URL; if False, open url as-is

    Returns:
        The same resource, for chaining
    """
    options = UrlCommandOptions(
        icon_name=icon_name,
        icon_variant=icon_variant,
        append_to_service_url=append_to_service_url,
    )
    return add_url_command_with_options(service, name, display_name, url, options)


def add_url_command_with_options(
    service: TResource,
    name: str,
    display_name: str,
    url: str,
    options: UrlCommandOptions,
    launcher_provider: Optional[Callable[[], UrlLauncher]] = None,
) -> TResource:
    """
    Add a URL-opening command configured by a UrlCommandOptions instance.

    Args:
        launcher_provider: Returns the launcher used on execution; defaults to
            the process-wide launcher from src.config.launcher

    Returns:
        The same resource, for chaining
    """
    command = UrlCommand(
        resource=service,
        name=name,
        display_name=display_name,
        url=url,
        options=options,
        launcher_provider=launcher_provider,
    )
    service.with_command(command)

    logger.info(
        f"Registered URL command '{name}' on '{service.name}' "
        f"(icon: {command.get_icon_name()}, append: {options.append_to_service_url})"
    )
    return service
