# topmark:header:start
#
#   project      : Goat
#   file         : exit_codes.py
#   file_relpath : src/goat/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Goat CLI.

Goat aligns with the BSD `sysexits` convention so that other tooling can interpret
failures consistently. Click's own usage errors (unknown options, missing option values)
keep Click's default exit code 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Goat CLI.

    Attributes:
        SUCCESS: Output was rendered and written.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid invocation: no template, unnamed input without a format,
            invalid output format. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input is malformed for its format, or not valid UTF-8. Mirrors BSD
            ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Template or input file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        UNSUPPORTED_FORMAT: No parser is registered for the input format. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        TEMPLATE_ERROR: The template failed to compile or execute. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading or writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: An explicit configuration file is missing or invalid. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNSUPPORTED_FORMAT = 69  # EX_UNAVAILABLE
    TEMPLATE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
