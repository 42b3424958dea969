# topmark:header:start
#
#   project      : Moustache
#   file         : main.py
#   file_relpath : src/moustache/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Moustache command line entry point.

Group-level options are resolved once into a frozen `Config` stored in
``ctx.obj["config"]``; subcommands read it from there.
"""

from __future__ import annotations

from typing import IO

import click

from moustache.cli.commands.escape_js import escape_js_command
from moustache.cli.commands.lookup import lookup_command
from moustache.cli.commands.version import version_command
from moustache.cli.errors import MoustacheConfigError
from moustache.config.loaders import load_config_from_toml_text
from moustache.config.logging import get_logger, parse_log_level, setup_logging
from moustache.config.model import Config, MutableConfig
from moustache.core.errors import ConfigError

logger = get_logger(__name__)


def build_config(
    *,
    config_file: IO[str] | None,
    log_level: str | None,
    no_color: bool,
) -> Config:
    """Resolve the effective configuration (defaults → file → env → CLI).

    Raises:
        MoustacheConfigError: If the configuration file or ``--log-level`` is invalid.
    """
    if config_file is not None:
        try:
            draft: MutableConfig = load_config_from_toml_text(config_file.read()).thaw()
        except ConfigError as exc:
            raise MoustacheConfigError(exc.message) from exc
    else:
        draft = MutableConfig.from_defaults().apply_env()

    if log_level is not None:
        level = parse_log_level(log_level)
        if level is None:
            raise MoustacheConfigError(f"Invalid log level: {log_level}")
        draft.log_level = level
    if no_color:
        draft.color_enabled = False
    return draft.freeze()


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Moustache value model tools.",
)
@click.option(
    "--config",
    "config_file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="TOML file with a [moustache] or [tool.moustache] table.",
)
@click.option(
    "--log-level",
    default=None,
    help="Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL or a number).",
)
@click.option("--no-color", is_flag=True, default=False, help="Disable colored log output.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: IO[str] | None,
    log_level: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Moustache CLI."""
    ctx.ensure_object(dict)
    config: Config = build_config(config_file=config_file, log_level=log_level, no_color=no_color)
    ctx.obj["config"] = config
    setup_logging(level=config.log_level, use_color=config.color_enabled)
    logger.debug("Effective configuration: %s", config)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(escape_js_command)

cli.add_command(lookup_command)

if __name__ == "__main__":
    cli()
