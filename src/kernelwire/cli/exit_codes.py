# topmark:header:start
#
#   project      : KernelWire
#   file         : exit_codes.py
#   file_relpath : src/kernelwire/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the KernelWire CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the KernelWire CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): A KernelWire error (e.g. an invalid config file) stopped the command.
        USAGE_ERROR (int): Invalid flags or arguments (Click's own usage error code).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
