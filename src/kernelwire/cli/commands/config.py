# topmark:header:start
#
#   project      : KernelWire
#   file         : config.py
#   file_relpath : src/kernelwire/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KernelWire `config` command.

Prints the effective encoder configuration (defaults merged with ``--config``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import tomlkit

from kernelwire.cli.cli_types import EnumChoiceParam
from kernelwire.core.formats import OutputFormat, is_machine_format
from kernelwire.wire.serializers import serialize_json_object

if TYPE_CHECKING:
    from kernelwire.cli.console import ClickConsole
    from kernelwire.config.model import EncoderConfig


@click.command(
    name="config",
    help="Show the effective encoder configuration.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format (text renders TOML).",
)
def config_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the effective encoder configuration.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    config: EncoderConfig = ctx.obj["config"]
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    table = config.to_dict()
    if is_machine_format(fmt):
        console.print(serialize_json_object(table))
        return

    # TOML has no null; an unset indent is left out.
    doc = tomlkit.document()
    for key, value in table.items():
        if value is not None:
            doc.add(key, value)

    if fmt == OutputFormat.MARKDOWN:
        console.print("```toml")
        console.print(tomlkit.dumps(doc).rstrip("\n"))
        console.print("```")
    else:
        console.print(tomlkit.dumps(doc).rstrip("\n"))
