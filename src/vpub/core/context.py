"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from vpub.core.browser.abc import Browser
from vpub.core.browser.dry_run import DryRunBrowser
from vpub.core.browser.real import RealBrowser
from vpub.core.npm.abc import Npm
from vpub.core.npm.dry_run import DryRunNpm
from vpub.core.npm.real import RealNpm
from vpub.core.registry.abc import Registry
from vpub.core.registry.real import DEFAULT_TIMEOUT_SECONDS, RealRegistry
from vpub.core.workdir import WorkDir


@dataclass(frozen=True)
class PublishContext:
    """Immutable context holding all dependencies for vpub operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    npm: Npm
    registry: Registry
    browser: Browser
    workdir: WorkDir
    dry_run: bool

    @staticmethod
    def for_test(
        npm: Npm | None = None,
        registry: Registry | None = None,
        browser: Browser | None = None,
        workdir: WorkDir | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "PublishContext":
        """Create test context with optional pre-configured integration classes.

        Unspecified integrations default to empty fakes. `cwd` is a shortcut
        for `workdir=WorkDir(root=cwd)`.

        Example:
            >>> registry = FakeRegistry(packages={"pkg": ["1.0.0"]})
            >>> ctx = PublishContext.for_test(registry=registry, cwd=tmp_path)
        """
        from tests.fakes.browser import FakeBrowser
        from tests.fakes.npm import FakeNpm
        from tests.fakes.registry import FakeRegistry

        if npm is None:
            npm = FakeNpm()

        if registry is None:
            registry = FakeRegistry()

        if browser is None:
            browser = FakeBrowser()

        if workdir is None:
            workdir = WorkDir(root=cwd or Path("/test/default/cwd"))

        # Apply dry-run wrappers if needed (matching production behavior)
        if dry_run:
            npm = DryRunNpm(npm)
            browser = DryRunBrowser()

        return PublishContext(
            npm=npm,
            registry=registry,
            browser=browser,
            workdir=workdir,
            dry_run=dry_run,
        )


def create_context(
    *,
    dry_run: bool,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    config_path: Path | None = None,
) -> PublishContext:
    """Create production context with real implementations.

    Args:
        dry_run: If True, wrap npm and browser with wrappers that print
                 intended actions without executing them
        timeout: Registry request timeout in seconds
        config_path: Optional config file overriding `<cwd>/config.yml`

    Returns:
        PublishContext rooted at the current working directory
    """
    npm: Npm = RealNpm()
    browser: Browser = RealBrowser()

    if dry_run:
        npm = DryRunNpm(npm)
        browser = DryRunBrowser()

    return PublishContext(
        npm=npm,
        registry=RealRegistry(timeout=timeout),
        browser=browser,
        workdir=WorkDir(root=Path.cwd(), config_override=config_path),
        dry_run=dry_run,
    )
