"""Registry configuration loading from the project's config.yml.

Example config:
  verdaccio_url: http://localhost:4873
  username: ci-bot
  password: hunter2
  email: ci-bot@example.com
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from vpub.core.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryConfig:
    """Immutable registry URL and credentials, loaded once per run."""

    registry_url: str
    username: str
    password: str
    email: str


def _as_str(value: object) -> str:
    # Missing and null fields pass through as empty strings; downstream
    # components surface the failure when the value is used.
    if value is None:
        return ""
    return str(value)


def load_registry_config(path: Path) -> RegistryConfig:
    """Load registry URL and credentials from a YAML file.

    Args:
        path: Location of the config file

    Returns:
        RegistryConfig with fields taken as-is from the file

    Raises:
        ConfigError: If the file is missing, unreadable, not valid YAML,
            or not a mapping at the top level
    """
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"failed to read config file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping at the top level")

    config = RegistryConfig(
        registry_url=_as_str(data.get("verdaccio_url")),
        username=_as_str(data.get("username")),
        password=_as_str(data.get("password")),
        email=_as_str(data.get("email")),
    )
    logger.debug("Loaded config: path=%s, registry_url=%s", path, config.registry_url)
    return config
