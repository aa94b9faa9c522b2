# topmark:header:start
#
#   project      : KernelWire
#   file         : errors.py
#   file_relpath : src/kernelwire/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the KernelWire CLI.

Library errors (`kernelwire.core.errors`) are converted to these at the command
boundary so Click prints them and exits with a standardized code.
"""

from __future__ import annotations

from typing import IO, Any

import click

from kernelwire.cli.exit_codes import ExitCode


class KernelWireCliError(click.ClickException):
    """Base class for all KernelWire CLI errors."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class KernelWireConfigError(KernelWireCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""
