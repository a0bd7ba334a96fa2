"""Production browser launcher using platform-specific commands."""

import logging
import subprocess
import sys

from vpub.core.browser.abc import Browser
from vpub.core.errors import BrowserOpenError

logger = logging.getLogger(__name__)


def build_open_command(platform: str, url: str) -> list[str]:
    """Return the launcher command for `platform` (a `sys.platform` value).

    Raises:
        BrowserOpenError: If the platform has no known launcher
    """
    if platform.startswith("linux"):
        return ["xdg-open", url]
    if platform == "win32":
        return ["rundll32", "url.dll,FileProtocolHandler", url]
    if platform == "darwin":
        return ["open", url]
    raise BrowserOpenError(f"unsupported platform: {platform}")


class RealBrowser(Browser):
    """Starts the platform launcher and returns immediately."""

    def __init__(self, platform: str | None = None) -> None:
        self._platform = platform if platform is not None else sys.platform

    def open(self, url: str) -> None:
        cmd = build_open_command(self._platform, url)
        logger.debug("Launching browser: %s", " ".join(cmd))
        try:
            subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except OSError as e:
            raise BrowserOpenError(f"failed to open browser with {cmd[0]}: {e}") from e
