from typing import Any
from src.core.launcher.interface import UrlLauncher
from src.core.launcher.memory import RecordingLauncher
from src.core.launcher.webbrowser_launcher import WebBrowserLauncher


def get_launcher(launcher_type: str = "webbrowser", **kwargs: Any) -> UrlLauncher:
    """
    Factory function to get the appropriate URL launcher implementation

    Args:
        launcher_type: Type of launcher ('webbrowser', or 'recording')
        **kwargs: Additional arguments for the launcher implementation

    Returns:
        UrlLauncher implementation
    """
    if launcher_type.lower() == "webbrowser":
        return WebBrowserLauncher(
            new=kwargs.get("new", 2),
            browser=kwargs.get("browser"),
        )

    elif launcher_type.lower() == "recording":
        return RecordingLauncher(fail_with=kwargs.get("fail_with"))

    else:
        raise ValueError(f"Unknown launcher type: {launcher_type}")
