"""Output utilities for CLI commands with clear intent.

user_output: diagnostics and status for humans (stderr)
machine_output: structured data for scripts (stdout)
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True, color: bool | None = None) -> None:
    """Output informational message for human users.

    Routes to stderr so that stdout stays clean for `--json` payloads.
    """
    click.echo(message, nl=nl, err=True, color=color)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Output structured data for machine consumption (stdout)."""
    click.echo(message, nl=nl)
