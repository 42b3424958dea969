# topmark:header:start
#
#   project      : Moustache
#   file         : errors.py
#   file_relpath : src/moustache/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Moustache CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes; Click prints them and exits.
"""

from __future__ import annotations

import click

from moustache.cli.exit_codes import ExitCode


class MoustacheCliError(click.ClickException):
    """Base class for all Moustache CLI errors."""

    exit_code = ExitCode.FAILURE


class MoustacheDataError(MoustacheCliError):
    """Error for input data that cannot be parsed."""

    exit_code = ExitCode.DATA_ERROR


class MoustacheConfigError(MoustacheCliError):
    """Error for configuration errors (invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
