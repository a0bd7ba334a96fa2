"""npm CLI operations interface."""

from abc import ABC, abstractmethod
from pathlib import Path


class Npm(ABC):
    """Abstract npm operations for dependency injection."""

    @abstractmethod
    def is_installed(self) -> bool:
        """Return True if the npm executable is on PATH."""
        ...

    @abstractmethod
    def publish(self, cwd: Path, registry_url: str, *, stdout_to_stderr: bool = False) -> int:
        """Run `npm publish --registry <url>` in `cwd`.

        Output streams are inherited from the current process.

        Args:
            cwd: Package directory
            registry_url: Registry to publish to
            stdout_to_stderr: Send npm's stdout to our stderr, keeping stdout
                free for machine output

        Returns:
            Exit code of the npm process
        """
        ...
