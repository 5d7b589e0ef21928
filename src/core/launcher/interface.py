from abc import ABC, abstractmethod


class UrlLaunchError(Exception):
    """Raised when a URL could not be handed to a handler"""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(reason)


class UrlLauncher(ABC):
    """Abstract interface for opening URLs with a platform handler"""

    @abstractmethod
    def open(self, url: str) -> None:
        """
        Hand a URL to the handler and return once the launch call completes.

        This is a blocking call; callers on an event loop should run it in a
        worker thread. The opened handler is not waited on.

        Args:
            url: Absolute URL to open

        Raises:
            UrlLaunchError: When no handler accepted the URL
        """
        pass
