"""Error taxonomy for vpub operations.

Components raise these and never recover from one another's failures. The CLI
layer is the only place that catches them, converting each into a styled
message and a nonzero exit code.
"""


class VpubError(Exception):
    """Base class for all errors surfaced to the user."""


class ConfigError(VpubError):
    """Registry config file is missing, unreadable or malformed."""


class ToolNotFoundError(VpubError):
    """The external publish tool is not on PATH."""


class CredentialIOError(VpubError):
    """Reading or writing the auth file failed."""


class ManifestError(VpubError):
    """Package identity could not be read from the manifest."""


class NetworkError(VpubError):
    """Registry request failed at the transport level or returned non-2xx."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(VpubError):
    """Registry response body was not the expected JSON document."""


class DuplicateVersionError(VpubError):
    """The target version already exists on the registry."""

    def __init__(self, version: str) -> None:
        super().__init__(
            f"version {version} already exists in the repository, "
            "please modify the version number and try again"
        )
        self.version = version


class PublishCommandError(VpubError):
    """`npm publish` exited with a nonzero status."""

    def __init__(self, exit_code: int) -> None:
        super().__init__(f"npm publish failed with exit code {exit_code}")
        self.exit_code = exit_code


class BrowserOpenError(VpubError):
    """Platform browser dispatch failed."""
