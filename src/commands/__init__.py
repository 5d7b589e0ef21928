"""
Command pattern implementation for dashboard menu commands.

Commands are attached to resources shown in an orchestration dashboard and
executed when an operator picks them from the resource's context menu.
"""
