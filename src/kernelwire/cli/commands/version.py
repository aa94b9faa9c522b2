# topmark:header:start
#
#   project      : KernelWire
#   file         : version.py
#   file_relpath : src/kernelwire/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KernelWire `version` command.

Prints the installed KernelWire version and the messaging protocol version it
encodes for.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kernelwire.cli.cli_types import EnumChoiceParam
from kernelwire.constants import KERNELWIRE_VERSION, PROTOCOL_VERSION
from kernelwire.core.formats import OutputFormat, is_machine_format
from kernelwire.core.keys import WireKey
from kernelwire.wire.serializers import serialize_json_object

if TYPE_CHECKING:
    from kernelwire.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the KernelWire version and the protocol version it implements.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of KernelWire.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if is_machine_format(fmt):
        console.print(
            serialize_json_object(
                {
                    WireKey.VERSION: KERNELWIRE_VERSION,
                    WireKey.PROTOCOL_VERSION: PROTOCOL_VERSION,
                }
            )
        )
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# KernelWire Version\n")
        console.print(f"**KernelWire version: {KERNELWIRE_VERSION}**\n")
        console.print(f"Messaging protocol version: {PROTOCOL_VERSION}")
    else:
        console.print(
            f"{console.styled(KERNELWIRE_VERSION, bold=True)} (protocol {PROTOCOL_VERSION})"
        )
