# topmark:header:start
#
#   project      : Moustache
#   file         : escape_js.py
#   file_relpath : src/moustache/cli/commands/escape_js.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Moustache `escape-js` command.

Escapes each argument (one output line per argument) for inclusion in a
JavaScript string literal. Without arguments, STDIN is escaped as a whole.
"""

from __future__ import annotations

import click

from moustache.config.logging import get_logger
from moustache.services.javascript import JavascriptEscape
from moustache.values.filters import apply_filter

logger = get_logger(__name__)


@click.command(
    name="escape-js",
    help="Escape TEXT (or STDIN) for a JavaScript string literal.",
)
@click.argument("texts", metavar="[TEXT]...", nargs=-1)
def escape_js_command(texts: tuple[str, ...]) -> None:
    """Escape each TEXT with the `js` filter and print the results.

    Args:
        texts (tuple[str, ...]): Texts to escape; STDIN is read when empty.
    """
    js = JavascriptEscape()
    if not texts:
        logger.debug("No TEXT argument, reading STDIN")
        stdin_text: str = click.get_text_stream("stdin").read()
        click.echo(apply_filter(js, [stdin_text]).as_string(), nl=False)
        return
    for text in texts:
        click.echo(apply_filter(js, [text]).as_string())
