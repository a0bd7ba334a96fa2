"""Login command - write registry credentials to .npmrc."""

from pathlib import Path

import click

from vpub.cli.core import config_option, credential_mode_option, exit_on_error, resolve_context
from vpub.core.config import load_registry_config
from vpub.core.credentials import CredentialMode
from vpub.core.orchestrator import login
from vpub.core.registry.real import DEFAULT_TIMEOUT_SECONDS


@click.command("login")
@config_option
@credential_mode_option
@click.option("--dry-run", is_flag=True, help="Show what would be written without writing it")
@click.pass_context
def login_cmd(
    click_ctx: click.Context, config_path: Path | None, credential_mode: str, dry_run: bool
) -> None:
    """Write registry credentials from config.yml into the project's .npmrc."""
    with exit_on_error():
        ctx = resolve_context(
            click_ctx, dry_run=dry_run, timeout=DEFAULT_TIMEOUT_SECONDS, config_path=config_path
        )
        config = load_registry_config(ctx.workdir.config_path)
        login(ctx, config, CredentialMode(credential_mode))
