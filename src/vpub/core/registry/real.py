"""Production Registry implementation over HTTP using httpx."""

import json
import logging

import httpx
from pydantic import ValidationError

from vpub.core.errors import NetworkError, ParseError
from vpub.core.registry.abc import Registry
from vpub.core.registry.types import RegistryPackageInfo

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def package_url(registry_url: str, package_name: str) -> str:
    """Build the package document URL; scoped names encode their slash."""
    return f"{registry_url.rstrip('/')}/{package_name.replace('/', '%2f')}"


def parse_package_info(body: str) -> RegistryPackageInfo:
    """Parse a registry package document.

    Raises:
        ParseError: If the body is not JSON or does not match the expected shape
    """
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ParseError(f"failed to parse JSON response: {e}") from e

    try:
        return RegistryPackageInfo.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"unexpected registry response shape: {e}") from e


class RealRegistry(Registry):
    """Queries the registry with a single bounded GET per call."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the registry client.

        Args:
            timeout: Seconds before the request is abandoned
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._timeout = timeout
        self._transport = transport

    def get_package_info(self, registry_url: str, package_name: str) -> RegistryPackageInfo:
        url = package_url(registry_url, package_name)
        logger.debug("Fetching package versions: url=%s, timeout=%s", url, self._timeout)

        try:
            with httpx.Client(
                timeout=self._timeout, transport=self._transport, follow_redirects=True
            ) as client:
                response = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(f"failed to fetch package versions from server: {e}") from e

        if not response.is_success:
            raise NetworkError(
                "failed to fetch package versions from server: "
                f"status code {response.status_code}",
                status_code=response.status_code,
            )

        return parse_package_info(response.text)
