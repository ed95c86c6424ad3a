# topmark:header:start
#
#   project      : ApiMark
#   file         : exit_codes.py
#   file_relpath : src/apimark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the ApiMark CLI application.

Usage:
    Exit codes can be used in scripts to determine the outcome of a run:

    ```python
    import subprocess
    from apimark.cli.exit_codes import ExitCode

    result = subprocess.run(["apimark", "html", "--outfile", "api.html"])
    if result.returncode == ExitCode.INPUT_FORMAT_ERROR:
        print("type-info.json is not valid JSON")
    ```
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ApiMark CLI.

    Attributes:
        SUCCESS (int): Generation completed (warnings may have been reported).
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid command-line usage.
        CONFIG_ERROR (int): A configuration file is missing or malformed.
        FILE_NOT_FOUND (int): The reflection tree file does not exist.
        IO_ERROR (int): An output file or directory could not be written.
        INPUT_FORMAT_ERROR (int): The reflection tree is not valid JSON (or not an object).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    FILE_NOT_FOUND = 4
    IO_ERROR = 5
    INPUT_FORMAT_ERROR = 6
