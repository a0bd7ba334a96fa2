"""No-op wrapper for npm operations."""

from pathlib import Path

import click

from vpub.core.npm.abc import Npm
from vpub.core.npm.real import build_publish_command
from vpub.core.output import user_output


class DryRunNpm(Npm):
    """Delegates the PATH check and prints the publish command instead of running it."""

    def __init__(self, wrapped: Npm) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The npm implementation to wrap
        """
        self._wrapped = wrapped

    def is_installed(self) -> bool:
        """Delegate read operation to wrapped implementation."""
        return self._wrapped.is_installed()

    def publish(self, cwd: Path, registry_url: str, *, stdout_to_stderr: bool = False) -> int:
        """Print the command that would run and report success."""
        cmd = " ".join(build_publish_command(registry_url))
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would run: {cmd} (in {cwd})")
        return 0
