# topmark:header:start
#
#   project      : FenceMark
#   file         : exit_codes.py
#   file_relpath : src/fencemark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the FenceMark CLI.

FenceMark aligns with the BSD `sysexits` convention where practical. The one
deliberate divergence is `WOULD_CHANGE=2`, used by ``--verify`` to signal that
documents are out of date. Click reports its own usage errors with 2 as well;
the "Out of date" lines on stderr tell the two apart.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FenceMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (e.g. a document could not be read or written).
        WOULD_CHANGE: ``--verify`` found documents whose fences are out of date.
        USAGE_ERROR: Invalid combination of flags/args. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: No input document matched. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Missing/invalid/malformed config. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
