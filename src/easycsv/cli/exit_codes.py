# topmark:header:start
#
#   project      : EasyCSV
#   file         : exit_codes.py
#   file_relpath : src/easycsv/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the EasyCSV CLI, aligned with the BSD `sysexits` convention."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the EasyCSV CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error (bad TARGET, bad ``--pattern``).
            Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Missing/invalid/malformed options file. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
    UNEXPECTED_ERROR = 255
