"""Package identity from package.json."""

import json
from dataclasses import dataclass
from pathlib import Path

from vpub.core.errors import ManifestError


@dataclass(frozen=True)
class PackageIdentity:
    name: str
    version: str


def read_package_identity(path: Path) -> PackageIdentity:
    """Read the `name` and `version` fields of an npm manifest.

    Raises:
        ManifestError: If the file cannot be opened or parsed, or either
            field is missing or not a string
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"failed to open package.json file: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(f"failed to parse package.json file: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError("failed to parse package.json file: expected a JSON object")

    name = data.get("name")
    version = data.get("version")
    if not isinstance(name, str) or not name:
        raise ManifestError("package.json is missing a 'name' field")
    if not isinstance(version, str) or not version:
        raise ManifestError("package.json is missing a 'version' field")

    return PackageIdentity(name=name, version=version)
