"""Publish command - log in, guard the version, run npm publish."""

import logging
from pathlib import Path

import click

from vpub.cli.core import (
    allow_new_package_option,
    config_option,
    credential_mode_option,
    exit_on_error,
    resolve_context,
    timeout_option,
)
from vpub.cli.json_output import PublishCommandResponse, emit_json
from vpub.core.credentials import CredentialMode
from vpub.core.orchestrator import PublishOptions, publish_package
from vpub.core.version_guard import MissingPackagePolicy

logger = logging.getLogger(__name__)


@click.command("publish")
@config_option
@credential_mode_option
@allow_new_package_option
@timeout_option
@click.option("--no-browser", is_flag=True, help="Do not open the registry UI after publishing")
@click.option("--dry-run", is_flag=True, help="Show what would be done without making changes")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_context
def publish_cmd(
    click_ctx: click.Context,
    config_path: Path | None,
    credential_mode: str,
    allow_new_package: bool,
    timeout: float,
    no_browser: bool,
    dry_run: bool,
    output_json: bool,
) -> None:
    """Publish the package in the current directory to the configured registry.

    Steps, stopping at the first failure:
    - Load registry URL and credentials from config.yml
    - Check that npm is on PATH
    - Write credentials to .npmrc
    - Refuse if package.json's version is already on the registry
    - Run npm publish and open the registry in a browser
    """
    with exit_on_error(output_json=output_json):
        ctx = resolve_context(
            click_ctx, dry_run=dry_run, timeout=timeout, config_path=config_path
        )
        options = PublishOptions(
            credential_mode=CredentialMode(credential_mode),
            missing_package=(
                MissingPackagePolicy.EMPTY if allow_new_package else MissingPackagePolicy.ERROR
            ),
            open_browser=not no_browser,
            npm_stdout_to_stderr=output_json,
        )
        logger.debug("Publishing: workdir=%s, options=%s", ctx.workdir.root, options)
        result = publish_package(ctx, options)

    if output_json:
        emit_json(
            PublishCommandResponse(
                name=result.name,
                version=result.version,
                registry_url=result.registry_url,
                browser_opened=result.browser_opened,
                dry_run=ctx.dry_run,
            )
        )
