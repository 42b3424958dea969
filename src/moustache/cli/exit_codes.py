# topmark:header:start
#
#   project      : Moustache
#   file         : exit_codes.py
#   file_relpath : src/moustache/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Moustache CLI.

Moustache aligns with the BSD `sysexits` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Moustache CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        DATA_ERROR: Input data could not be parsed. Mirrors BSD ``EX_DATAERR (65)``.
        CONFIG_ERROR: Configuration error (invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    DATA_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG
