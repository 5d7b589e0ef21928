from typing import List, Optional

from src.core.launcher.interface import UrlLauncher, UrlLaunchError


class RecordingLauncher(UrlLauncher):
    """
    Launcher that records URLs instead of opening them.

    Used for headless hosts (containers, CI) and tests. Setting
    fail_with makes every launch raise UrlLaunchError with that reason.
    """

    def __init__(self, fail_with: Optional[str] = None):
        self._opened: List[str] = []
        self._fail_with = fail_with

    @property
    def opened_urls(self) -> List[str]:
        """URLs opened so far, in call order"""
        return list(self._opened)

    def open(self, url: str) -> None:
        if self._fail_with is not None:
            raise UrlLaunchError(url, self._fail_with)
        self._opened.append(url)

    def clear(self) -> int:
        """Forget recorded URLs and return how many were dropped"""
        count = len(self._opened)
        self._opened.clear()
        return count
