from typing import Optional

from src.config.constants import DEFAULT_ICON_NAME


def format_icon_name(icon_name: Optional[str]) -> str:
    """
    Format an icon name for the dashboard icon catalog.

    Whitespace is removed and each word is capitalized, so names can be
    copied straight from the icon browser:

    - "add square" -> "AddSquare"
    - "document table" -> "DocumentTable"
    - "API management" -> "ApiManagement"
    - "text DOCUMENT" -> "TextDocument"

    Args:
        icon_name: Raw icon name, possibly empty or irregularly spaced

    Returns:
        Formatted icon name, or "Document" when nothing usable was given
    """
    if not icon_name or not icon_name.strip():
        return DEFAULT_ICON_NAME

    words = icon_name.split()
    return "".join(word.capitalize() for word in words)
