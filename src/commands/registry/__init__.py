"""
Per-resource command registry.
"""

from .command_registry import CommandRegistry

__all__ = ["CommandRegistry"]
