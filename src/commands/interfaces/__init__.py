"""
Command pattern interfaces for dashboard menu commands.
"""

from .command import Command
from .command_context import ExecuteCommandContext, UpdateStateContext
from .command_result import CommandResult

__all__ = ["Command", "ExecuteCommandContext", "UpdateStateContext", "CommandResult"]
