# topmark:header:start
#
#   project      : KernelWire
#   file         : __init__.py
#   file_relpath : src/kernelwire/wire/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Outbound wire encoding.

Separation of concerns:

1) Leaf value encoders (enums, language info, JSON pass-through)
   - [`kernelwire.wire.values`][kernelwire.wire.values]

2) Rich-display payload encoding (MIME-keyed maps, JSON re-parse table)
   - [`kernelwire.wire.display`][kernelwire.wire.display]

3) Message-content dispatch (one encoder per variant)
   - [`kernelwire.wire.encoder`][kernelwire.wire.encoder]

4) Wire records for the transport (`msg_type` + channel + content)
   - [`kernelwire.wire.shapes`][kernelwire.wire.shapes]

5) Serialization (turn content into strings; no printing, no I/O)
   - [`kernelwire.wire.serializers`][kernelwire.wire.serializers]

Rule of thumb: everything here returns plain `dict` / `list` / `str` values and
has no side effects beyond logging.
"""

from __future__ import annotations

from kernelwire.wire.display import encode_display_data, encode_display_entry
from kernelwire.wire.encoder import encode_message
from kernelwire.wire.serializers import (
    iter_ndjson_strings,
    serialize_content,
    serialize_json_object,
)
from kernelwire.wire.shapes import build_wire_record, message_channel, message_type

__all__ = [
    "build_wire_record",
    "encode_display_data",
    "encode_display_entry",
    "encode_message",
    "iter_ndjson_strings",
    "message_channel",
    "message_type",
    "serialize_content",
    "serialize_json_object",
]
