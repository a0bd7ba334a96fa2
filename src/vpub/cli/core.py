"""Shared plumbing for vpub commands: context resolution and error exits."""

import dataclasses
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from vpub.cli.json_output import ErrorResponse, emit_json
from vpub.core.context import PublishContext, create_context
from vpub.core.errors import VpubError
from vpub.core.output import user_output
from vpub.core.registry.real import DEFAULT_TIMEOUT_SECONDS


def resolve_context(
    click_ctx: click.Context,
    *,
    dry_run: bool,
    timeout: float,
    config_path: Path | None,
) -> PublishContext:
    """Return the injected context (tests) or build the production one."""
    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        return create_context(dry_run=dry_run, timeout=timeout, config_path=config_path)

    ctx: PublishContext = click_ctx.obj
    if config_path is not None:
        ctx = dataclasses.replace(
            ctx, workdir=dataclasses.replace(ctx.workdir, config_override=config_path)
        )
    return ctx


@contextmanager
def exit_on_error(*, output_json: bool = False) -> Iterator[None]:
    """Convert VpubError into a red "Error:" message and exit code 1.

    KeyboardInterrupt exits with 130.
    """
    try:
        yield
    except VpubError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        if output_json:
            emit_json(ErrorResponse(error=str(e), error_type=type(e).__name__, exit_code=1))
        raise SystemExit(1) from None
    except KeyboardInterrupt:
        user_output("\n✗ Interrupted by user")
        raise SystemExit(130) from None


def config_option[F: Callable](f: F) -> F:
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Registry config file (default: ./config.yml)",
    )(f)


def timeout_option[F: Callable](f: F) -> F:
    return click.option(
        "--timeout",
        type=click.FloatRange(min=0, min_open=True),
        default=DEFAULT_TIMEOUT_SECONDS,
        show_default=True,
        envvar="VPUB_TIMEOUT",
        help="Seconds to wait for the registry before giving up",
    )(f)


def credential_mode_option[F: Callable](f: F) -> F:
    return click.option(
        "--credential-mode",
        type=click.Choice(["merge", "replace"]),
        default="merge",
        show_default=True,
        envvar="VPUB_CREDENTIAL_MODE",
        help="Merge into an existing .npmrc or replace it entirely",
    )(f)


def allow_new_package_option[F: Callable](f: F) -> F:
    return click.option(
        "--allow-new-package",
        is_flag=True,
        help="Treat a 404 from the registry as a package with no published versions",
    )(f)
