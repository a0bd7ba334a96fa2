"""Publish workflow: login, duplicate-version guard, npm publish, notify.

Each step runs to completion before the next starts and the first error ends
the run. Errors propagate to the CLI layer unchanged; nothing is retried and
nothing already written (such as the auth file) is rolled back.
"""

import logging
from dataclasses import dataclass

import click

from vpub.core.config import RegistryConfig, load_registry_config
from vpub.core.context import PublishContext
from vpub.core.credentials import CredentialMode, persist_credentials
from vpub.core.errors import BrowserOpenError, PublishCommandError, ToolNotFoundError
from vpub.core.manifest import PackageIdentity, read_package_identity
from vpub.core.output import user_output
from vpub.core.version_guard import MissingPackagePolicy, ensure_not_published

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublishOptions:
    credential_mode: CredentialMode = CredentialMode.MERGE
    missing_package: MissingPackagePolicy = MissingPackagePolicy.ERROR
    open_browser: bool = True
    npm_stdout_to_stderr: bool = False


@dataclass(frozen=True)
class PublishResult:
    name: str
    version: str
    registry_url: str
    browser_opened: bool


def ensure_npm_installed(ctx: PublishContext) -> None:
    if not ctx.npm.is_installed():
        raise ToolNotFoundError("npm not found in PATH")


def login(ctx: PublishContext, config: RegistryConfig, mode: CredentialMode) -> None:
    """Persist registry credentials into the project's auth file.

    In dry-run mode the write is reported and skipped.
    """
    auth_path = ctx.workdir.auth_path
    if ctx.dry_run:
        user_output(
            click.style("[DRY RUN] ", fg="yellow")
            + f"Would write {mode.value} credentials for {config.registry_url} to {auth_path}"
        )
        return
    persist_credentials(config, auth_path, mode)
    user_output(f"Logged in to {config.registry_url} ({auth_path.name} updated)")


def check_version(
    ctx: PublishContext, config: RegistryConfig, policy: MissingPackagePolicy
) -> PackageIdentity:
    """Read the manifest and verify its version is not on the registry yet."""
    identity = read_package_identity(ctx.workdir.manifest_path)
    logger.debug("Package identity: name=%s, version=%s", identity.name, identity.version)
    ensure_not_published(
        ctx.registry,
        config.registry_url,
        identity.name,
        identity.version,
        missing_package=policy,
    )
    return identity


def open_registry_ui(ctx: PublishContext, url: str) -> bool:
    """Best-effort browser launch; failure is reported but never fatal."""
    try:
        ctx.browser.open(url)
    except BrowserOpenError as e:
        logger.warning("Could not open browser: %s", e)
        user_output(click.style("Warning: ", fg="yellow") + f"could not open browser: {e}")
        return False
    return True


def publish_package(ctx: PublishContext, options: PublishOptions) -> PublishResult:
    """Run the full publish sequence against the configured registry.

    Raises:
        VpubError: Any subclass, from the first step that fails
    """
    config = load_registry_config(ctx.workdir.config_path)
    ensure_npm_installed(ctx)
    login(ctx, config, options.credential_mode)

    identity = check_version(ctx, config, options.missing_package)
    user_output(f"Publishing {identity.name}@{identity.version} to {config.registry_url}...")

    exit_code = ctx.npm.publish(
        ctx.workdir.root,
        config.registry_url,
        stdout_to_stderr=options.npm_stdout_to_stderr,
    )
    if exit_code != 0:
        raise PublishCommandError(exit_code)

    user_output(click.style(f"Package published to {config.registry_url}", fg="green"))

    browser_opened = False
    if options.open_browser:
        browser_opened = open_registry_ui(ctx, config.registry_url)

    return PublishResult(
        name=identity.name,
        version=identity.version,
        registry_url=config.registry_url,
        browser_opened=browser_opened,
    )
