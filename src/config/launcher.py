import os
from typing import Optional

from src.config.constants import URL_LAUNCHER_TYPE
from src.core.launcher.factory import get_launcher
from src.core.launcher.interface import UrlLauncher

_url_launcher: Optional[UrlLauncher] = None


def get_url_launcher() -> UrlLauncher:
    """
    Get the process-wide URL launcher.

    The launcher type comes from the URL_LAUNCHER_TYPE environment variable
    ('webbrowser' or 'recording') and is resolved on first use, after any
    .env file has been loaded.
    """
    global _url_launcher
    if _url_launcher is None:
        launcher_type = os.environ.get("URL_LAUNCHER_TYPE", URL_LAUNCHER_TYPE)
        _url_launcher = get_launcher(launcher_type=launcher_type)
    return _url_launcher


def set_url_launcher(launcher: Optional[UrlLauncher]) -> None:
    """Replace the process-wide launcher (None resets to the configured one)"""
    global _url_launcher
    _url_launcher = launcher
