"""Browser launch interface."""

from abc import ABC, abstractmethod


class Browser(ABC):
    """Abstract default-browser launcher for dependency injection."""

    @abstractmethod
    def open(self, url: str) -> None:
        """Open `url` in the user's default browser without waiting for it.

        Raises:
            BrowserOpenError: If the platform is unsupported or the launcher
                cannot be started
        """
        ...
