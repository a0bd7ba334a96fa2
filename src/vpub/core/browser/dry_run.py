"""No-op browser for dry-run mode."""

import click

from vpub.core.browser.abc import Browser
from vpub.core.output import user_output


class DryRunBrowser(Browser):
    """Prints the URL that would be opened.

    Unlike DryRunNpm there is no read side to delegate, so nothing is wrapped.
    """

    def open(self, url: str) -> None:
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would open {url} in browser")
