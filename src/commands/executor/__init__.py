"""
Command executor for running resource commands with error handling,
timeouts, logging, and metrics collection.
"""

from .command_executor import CommandExecutor

__all__ = ["CommandExecutor"]
