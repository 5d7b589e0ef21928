import logging
import webbrowser
from typing import Optional

from src.core.launcher.interface import UrlLauncher, UrlLaunchError

logger = logging.getLogger(__name__)


class WebBrowserLauncher(UrlLauncher):
    """
    Opens URLs with the platform's default browser through `webbrowser`.

    Args:
        new: 0 reuses a window, 1 opens a new window, 2 opens a new tab
        browser: Optional browser name registered with `webbrowser`
    """

    def __init__(self, new: int = 2, browser: Optional[str] = None):
        self._new = new
        self._browser = browser

    def open(self, url: str) -> None:
        controller = webbrowser.get(self._browser) if self._browser else webbrowser
        logger.debug(f"Opening {url} with the default browser")

        if not controller.open(url, new=self._new):
            raise UrlLaunchError(url, f"no browser available to open {url}")
