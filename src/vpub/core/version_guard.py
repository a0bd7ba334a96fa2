"""Pre-publish duplicate-version check.

This is a point-in-time check: another publisher can still race us between
the check and `npm publish`. The registry's own rejection at publish time
stays authoritative; the guard only fails fast with a clearer message.
"""

import logging
from enum import StrEnum

from vpub.core.errors import DuplicateVersionError, NetworkError
from vpub.core.registry.abc import Registry
from vpub.core.registry.types import RegistryPackageInfo

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404


class MissingPackagePolicy(StrEnum):
    """How to treat a 404 for a package that has never been published."""

    ERROR = "error"
    EMPTY = "empty"


def is_version_published(info: RegistryPackageInfo, version: str) -> bool:
    """Exact string match against version keys and their metadata."""
    for key, metadata in info.versions.items():
        if key == version or metadata.version == version:
            return True
    return False


def ensure_not_published(
    registry: Registry,
    registry_url: str,
    package_name: str,
    version: str,
    *,
    missing_package: MissingPackagePolicy = MissingPackagePolicy.ERROR,
) -> None:
    """Fail if `version` of `package_name` already exists on the registry.

    Args:
        registry: Registry client
        registry_url: Base URL of the registry
        package_name: npm package name
        version: Version about to be published
        missing_package: ERROR keeps a 404 as NetworkError; EMPTY treats it
            as zero published versions

    Raises:
        DuplicateVersionError: If the version is already published
        NetworkError: On transport failure or non-2xx (subject to missing_package)
        ParseError: If the registry response is malformed
    """
    try:
        info = registry.get_package_info(registry_url, package_name)
    except NetworkError as e:
        if e.status_code == HTTP_NOT_FOUND and missing_package == MissingPackagePolicy.EMPTY:
            logger.debug("Package %s not found on registry; treating as unpublished", package_name)
            return
        raise

    logger.debug(
        "Registry versions: package=%s, count=%d, target=%s",
        package_name,
        len(info.versions),
        version,
    )
    if is_version_published(info, version):
        raise DuplicateVersionError(version)
