"""Production npm implementation using subprocess."""

import logging
import shutil
import subprocess
import sys
from pathlib import Path

from vpub.core.npm.abc import Npm

logger = logging.getLogger(__name__)

NPM_EXECUTABLE = "npm"


def build_publish_command(registry_url: str) -> list[str]:
    return [NPM_EXECUTABLE, "publish", "--registry", registry_url]


class RealNpm(Npm):
    """Runs the npm CLI found on PATH."""

    def is_installed(self) -> bool:
        return shutil.which(NPM_EXECUTABLE) is not None

    def publish(self, cwd: Path, registry_url: str, *, stdout_to_stderr: bool = False) -> int:
        cmd = build_publish_command(registry_url)
        logger.debug("Running: %s (cwd=%s)", " ".join(cmd), cwd)
        # No capture: npm's progress and errors stream straight to the terminal
        stdout = sys.stderr if stdout_to_stderr else None
        result = subprocess.run(cmd, cwd=cwd, check=False, stdout=stdout)
        return result.returncode
