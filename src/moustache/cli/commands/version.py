# topmark:header:start
#
#   project      : Moustache
#   file         : version.py
#   file_relpath : src/moustache/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Moustache `version` command."""

from __future__ import annotations

import click

from moustache.constants import MOUSTACHE_VERSION


@click.command(
    name="version",
    help="Show the current version of Moustache.",
)
def version_command() -> None:
    """Print the Moustache version as installed in the current Python environment."""
    click.echo(MOUSTACHE_VERSION)
