from typing import Any, Dict, List, Optional
import logging
from src.commands.interfaces.command import Command
from src.commands.interfaces.command_context import UpdateStateContext


logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Registry of the commands attached to a single resource.

    Command names are unique within a registry; registering a second
    command under an existing name is rejected. Commands are never mutated
    after registration, only their presentation state is recomputed from
    the snapshot passed to get_command_info().

    Usage:
        registry = CommandRegistry("api")
        registry.add_command(command)
        info = registry.get_command_info("swagger-docs", context)
    """

    def __init__(self, resource_name: str):
        """
        Initialize an empty command registry.

        Args:
            resource_name: Name of the resource owning the commands (for logging)
        """
        self._resource_name = resource_name

        # Registered commands keyed by command name, in registration order
        self._commands: Dict[str, Command] = {}

    def add_command(self, command: Command) -> None:
        """
        Register a command.

        Args:
            command: Command to add

        Raises:
            ValueError: If a command with the same name already exists
        """
        command_name = command.get_command_name()

        if command_name in self._commands:
            raise ValueError(
                f"Command '{command_name}' already exists on resource '{self._resource_name}'"
            )

        self._commands[command_name] = command
        logger.debug(f"Registered command '{command_name}' on '{self._resource_name}'")

    def get_command(self, command_name: str) -> Command:
        """
        Get a registered command by name.

        Raises:
            ValueError: If command_name is not registered
        """
        if command_name not in self._commands:
            available_commands = list(self._commands.keys())
            raise ValueError(
                f"Command '{command_name}' not found. Available commands: {available_commands}"
            )
        return self._commands[command_name]

    def find_command(self, command_name: str) -> Optional[Command]:
        """Get a registered command by name, or None"""
        return self._commands.get(command_name)

    def get_available_commands(self) -> List[str]:
        """
        Get list of all registered command names.

        Returns:
            List of command names in registration order
        """
        return list(self._commands.keys())

    def get_command_info(
        self, command_name: str, context: UpdateStateContext
    ) -> Dict[str, Any]:
        """
        Get the descriptor of a command together with its current state.

        Args:
            command_name: Name of the command
            context: Snapshot used to evaluate the state callback

        Returns:
            Dictionary containing command information

        Raises:
            ValueError: If command_name is not registered
        """
        command = self.get_command(command_name)
        info = command.describe()
        info["state"] = command.update_state(context).value
        return info
