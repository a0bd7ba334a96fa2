"""Registry read operations interface."""

from abc import ABC, abstractmethod

from vpub.core.registry.types import RegistryPackageInfo


class Registry(ABC):
    """Abstract registry queries for dependency injection."""

    @abstractmethod
    def get_package_info(self, registry_url: str, package_name: str) -> RegistryPackageInfo:
        """Fetch the package document for `package_name`.

        Args:
            registry_url: Base URL of the registry
            package_name: npm package name, possibly scoped (`@scope/name`)

        Returns:
            Parsed package document

        Raises:
            NetworkError: On transport failure or a non-2xx response
            ParseError: If the body is not a valid package document
        """
        ...
