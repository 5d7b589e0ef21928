"""
Enumerations shared between commands, resources and the dashboard API.

Values match the names the dashboard host uses on the wire, so they can be
returned from API responses without translation.
"""

from enum import Enum


class IconVariant(str, Enum):
    """Variant of a catalog icon shown next to a command"""

    REGULAR = "Regular"  # outlined version
    FILLED = "Filled"


class HealthStatus(str, Enum):
    """Health reported by the host for a resource snapshot"""

    HEALTHY = "Healthy"
    DEGRADED = "Degraded"
    UNHEALTHY = "Unhealthy"


class CommandState(str, Enum):
    """Presentation state of a command in a resource's context menu"""

    ENABLED = "Enabled"
    DISABLED = "Disabled"
