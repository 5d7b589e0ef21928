"""
Command implementations for dashboard resources.

Each command encapsulates a single context menu action and can be
executed independently of the API layer.
"""

from .url_command import UrlCommand

__all__ = ["UrlCommand"]
