from abc import ABC, abstractmethod
from typing import Any, Dict
import logging
from src.config.constants import DEFAULT_ICON_NAME
from src.models.types import CommandState, IconVariant
from .command_context import ExecuteCommandContext, UpdateStateContext
from .command_result import CommandResult


class Command(ABC):
    """
    Base interface for commands shown in a resource's dashboard context menu.

    A command is registered once per resource and lives as long as the
    resource's registration. The host calls execute() when a user triggers
    the command and update_state() whenever it needs to decide whether the
    command is rendered as enabled.

    All commands must implement:
    - execute(): The action run on click
    - update_state(): Enabled/disabled decision from the latest snapshot
    - get_command_name(): Identifier, unique per resource
    - get_display_name(): Label shown in the menu
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    async def execute(self, context: ExecuteCommandContext) -> CommandResult:
        """
        Execute the command for a single user click.

        Implementations report failures through the returned result and must
        not raise past this boundary.

        Args:
            context: ExecuteCommandContext for the click

        Returns:
            CommandResult with the outcome of the invocation
        """
        pass

    @abstractmethod
    def update_state(self, context: UpdateStateContext) -> CommandState:
        """
        Decide how the command is presented for the given snapshot.

        Must be a pure function of the context.

        Args:
            context: UpdateStateContext carrying the latest health report

        Returns:
            CommandState for the menu entry
        """
        pass

    @abstractmethod
    def get_command_name(self) -> str:
        """
        Return the identifier for this command.

        Names must be unique among the commands of one resource.
        """
        pass

    @abstractmethod
    def get_display_name(self) -> str:
        """Return the label shown in the dashboard menu"""
        pass

    def get_icon_name(self) -> str:
        """Return the catalog icon name (default: "Document")"""
        return DEFAULT_ICON_NAME

    def get_icon_variant(self) -> IconVariant:
        """Return the icon variant (default: filled)"""
        return IconVariant.FILLED

    def describe(self) -> Dict[str, Any]:
        """Descriptor the host uses to render the menu entry"""
        return {
            "name": self.get_command_name(),
            "display_name": self.get_display_name(),
            "icon_name": self.get_icon_name(),
            "icon_variant": self.get_icon_variant().value,
        }

    def __str__(self) -> str:
        """String representation of the command"""
        return f"{self.__class__.__name__}(name='{self.get_command_name()}')"

    def __repr__(self) -> str:
        """Detailed string representation of the command"""
        return (
            f"{self.__class__.__name__}("
            f"name='{self.get_command_name()}', "
            f"display_name='{self.get_display_name()}', "
            f"icon='{self.get_icon_name()}:{self.get_icon_variant().value}'"
            f")"
        )
