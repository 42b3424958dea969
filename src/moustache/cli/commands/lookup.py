# topmark:header:start
#
#   project      : Moustache
#   file         : lookup.py
#   file_relpath : src/moustache/cli/commands/lookup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Moustache `lookup` command.

Converts a TOML document into a `Value` and resolves a key path against it the
way a template resolves ``{{a.b.c}}``: one key at a time, with collections
answering their pseudo keys (``count``, ``firstObject``, ``lastObject``,
``anyObject``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from moustache.cli.errors import MoustacheDataError
from moustache.config.logging import get_logger
from moustache.values.value import Value

if TYPE_CHECKING:
    from moustache.config.model import Config

logger = get_logger(__name__)


def resolve_key_path(root: Value, keys: list[str]) -> Value:
    """Extract ``keys`` one after the other, starting from ``root``."""
    value: Value = root
    for key in keys:
        value = value[key]
        logger.trace("%s -> %r", key, value)
    return value


@click.command(
    name="lookup",
    help="Resolve a key PATH (e.g. 'users.firstObject.name') in TOML data.",
)
@click.argument("path")
@click.option(
    "--data",
    "data_text",
    default=None,
    help="TOML document to query (default: read STDIN).",
)
@click.option(
    "--truthy",
    is_flag=True,
    default=False,
    help="Print whether the value would trigger a section (true/false).",
)
@click.pass_context
def lookup_command(ctx: click.Context, path: str, data_text: str | None, truthy: bool) -> None:
    """Resolve PATH in the TOML data and print the result.

    Args:
        ctx (click.Context): Click context holding the effective `Config`.
        path (str): Key path, split with the configured key separator.
        data_text (str | None): TOML document; STDIN is read when ``None``.
        truthy (bool): Print truthiness instead of the display string.
    """
    config: Config = ctx.obj["config"]
    if data_text is None:
        data_text = click.get_text_stream("stdin").read()
    try:
        data: dict[str, Any] = tomlkit.parse(data_text).unwrap()
    except TomlkitParseError as exc:
        raise MoustacheDataError(f"Invalid TOML data: {exc}") from exc

    value: Value = resolve_key_path(Value(data), config.split_key_path(path))
    if truthy:
        click.echo("true" if value.truthy else "false")
    else:
        click.echo(value.as_string())
