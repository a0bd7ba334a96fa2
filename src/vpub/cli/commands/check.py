"""Check command - verify package.json's version is not yet published."""

from pathlib import Path

import click

from vpub.cli.core import (
    allow_new_package_option,
    config_option,
    exit_on_error,
    resolve_context,
    timeout_option,
)
from vpub.core.config import load_registry_config
from vpub.core.orchestrator import check_version
from vpub.core.output import user_output
from vpub.core.version_guard import MissingPackagePolicy


@click.command("check")
@config_option
@allow_new_package_option
@timeout_option
@click.pass_context
def check_cmd(
    click_ctx: click.Context, config_path: Path | None, allow_new_package: bool, timeout: float
) -> None:
    """Check the registry for the current package version without publishing.

    Does not touch .npmrc and does not run npm.
    """
    with exit_on_error():
        ctx = resolve_context(click_ctx, dry_run=False, timeout=timeout, config_path=config_path)
        config = load_registry_config(ctx.workdir.config_path)
        policy = MissingPackagePolicy.EMPTY if allow_new_package else MissingPackagePolicy.ERROR
        identity = check_version(ctx, config, policy)

    user_output(
        click.style("✓ ", fg="green")
        + f"{identity.name}@{identity.version} is not yet published to {config.registry_url}"
    )
