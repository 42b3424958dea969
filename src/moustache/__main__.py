# topmark:header:start
#
#   project      : Moustache
#   file         : __main__.py
#   file_relpath : src/moustache/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the Moustache CLI with ``python -m moustache``."""

from moustache.cli.main import cli

if __name__ == "__main__":
    cli()
