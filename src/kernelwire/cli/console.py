# topmark:header:start
#
#   project      : KernelWire
#   file         : console.py
#   file_relpath : src/kernelwire/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Separates CLI output from internal logging: use the console for messages meant
for end users, and `logging` for diagnostics.
"""

from __future__ import annotations

from typing import Any

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
    """

    enable_color: bool

    def __init__(self, *, enable_color: bool = True) -> None:
        self.enable_color = enable_color

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, err=True, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments supported by click.style.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
