"""Explicit working-directory value threaded through every component."""

from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "config.yml"
MANIFEST_FILE_NAME = "package.json"
AUTH_FILE_NAME = ".npmrc"


@dataclass(frozen=True)
class WorkDir:
    """Project directory plus the fixed file names vpub reads and writes.

    config_override replaces the default `config.yml` location when the user
    passes --config.
    """

    root: Path
    config_override: Path | None = None

    @property
    def config_path(self) -> Path:
        if self.config_override is not None:
            return self.config_override
        return self.root / CONFIG_FILE_NAME

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_FILE_NAME

    @property
    def auth_path(self) -> Path:
        return self.root / AUTH_FILE_NAME
