# topmark:header:start
#
#   project      : KernelWire
#   file         : kinds.py
#   file_relpath : src/kernelwire/cli/commands/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KernelWire `kinds` command.

Lists the closed set of message kinds the encoder handles, with their protocol
``msg_type``, socket channel and Python class.

Machine shapes:
  - JSON: ``{"kinds": [{"msg_type", "channel", "class", "description"}, ...]}``
  - NDJSON: one ``{"msg_type", "channel", "class", "description"}`` object per line
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from kernelwire.cli.cli_types import EnumChoiceParam
from kernelwire.core.formats import OutputFormat
from kernelwire.protocol.messages import MESSAGE_CLASSES
from kernelwire.protocol.types import Channel
from kernelwire.wire.serializers import iter_ndjson_strings, serialize_json_object

if TYPE_CHECKING:
    from kernelwire.cli.console import ClickConsole


def build_kind_rows(channel: Channel | None = None) -> list[dict[str, Any]]:
    """Return one row per message kind, optionally restricted to ``channel``.

    Rows are sorted by ``msg_type``.
    """
    rows: list[dict[str, Any]] = []
    for cls in MESSAGE_CLASSES:
        if channel is not None and cls.CHANNEL is not channel:
            continue
        rows.append(
            {
                "msg_type": cls.MSG_TYPE.value,
                "channel": cls.CHANNEL.value,
                "class": cls.__name__,
                "description": cls.MSG_TYPE.label,
            }
        )
    rows.sort(key=lambda row: row["msg_type"])
    return rows


@click.command(
    name="kinds",
    help="List the message kinds KernelWire can encode.",
)
@click.option(
    "--channel",
    type=EnumChoiceParam(Channel),
    default=None,
    help=f"Only list kinds sent on this channel ({', '.join(c.value for c in Channel)}).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def kinds_command(
    *,
    channel: Channel | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """List encodable message kinds.

    Args:
        channel (Channel | None): Optional channel filter.
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    rows = build_kind_rows(channel)

    if fmt == OutputFormat.JSON:
        console.print(serialize_json_object({"kinds": rows}))
    elif fmt == OutputFormat.NDJSON:
        for line in iter_ndjson_strings(rows):
            console.print(line)
    elif fmt == OutputFormat.MARKDOWN:
        console.print("| msg_type | channel | class | description |")
        console.print("|---|---|---|---|")
        for row in rows:
            console.print(
                f"| `{row['msg_type']}` | {row['channel']} | `{row['class']}` "
                f"| {row['description']} |"
            )
    else:
        width = max((len(row["msg_type"]) for row in rows), default=0)
        for row in rows:
            name = console.styled(row["msg_type"].ljust(width), bold=True)
            console.print(f"{name}  {row['channel']:<8} {row['class']}")
