import logging
import os

import click

from vpub.cli.commands.check import check_cmd
from vpub.cli.commands.login import login_cmd
from vpub.cli.commands.publish import publish_cmd

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "VPUB_DEBUG"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="vpub")
@click.option("--debug", is_flag=True, help="Log each step to stderr")
def cli(debug: bool) -> None:
    """Publish npm packages to a private registry."""
    if debug or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


# Register all commands
cli.add_command(check_cmd)
cli.add_command(login_cmd)
cli.add_command(publish_cmd)


def main() -> None:
    """CLI entry point used by the `vpub` console script."""
    cli()
