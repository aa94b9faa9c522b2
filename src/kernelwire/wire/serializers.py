# topmark:header:start
#
#   project      : KernelWire
#   file         : serializers.py
#   file_relpath : src/kernelwire/wire/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pure JSON serialization utilities for encoded content.

This module converts *already-encoded* content objects (or wire records) into
strings. The transport layer is responsible for UTF-8 encoding, signing and
framing; nothing here performs I/O.

Conventions:
- `json.dumps()` does not append a trailing newline.
- Output is compact unless `EncoderConfig.indent` is set.
- Keys are sorted by default so encoding the same message twice yields
  byte-identical text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from kernelwire.config.model import DEFAULT_CONFIG
from kernelwire.wire.encoder import encode_message

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from kernelwire.config.model import EncoderConfig
    from kernelwire.protocol.messages import Message

_COMPACT_SEPARATORS = (",", ":")


def serialize_json_object(obj: object, *, config: EncoderConfig | None = None) -> str:
    """Serialize a JSON-compatible object (no trailing newline).

    Args:
        obj: The object to serialize.
        config: Controls key sorting and indentation; defaults to `DEFAULT_CONFIG`.

    Returns:
        The JSON text.
    """
    cfg: EncoderConfig = config or DEFAULT_CONFIG
    return json.dumps(
        obj,
        ensure_ascii=False,
        allow_nan=False,
        sort_keys=cfg.sort_keys,
        indent=cfg.indent,
        separators=_COMPACT_SEPARATORS if cfg.indent is None else None,
    )


def serialize_content(message: Message, *, config: EncoderConfig | None = None) -> str:
    """Encode ``message`` and serialize its content object.

    Args:
        message: The message variant to encode.
        config: Encoder and serializer options; defaults to `DEFAULT_CONFIG`.

    Returns:
        The JSON text of the content object.

    Raises:
        UnsupportedMessageError: If ``message`` is not a known variant.
    """
    return serialize_json_object(encode_message(message, config=config), config=config)


def iter_ndjson_strings(records: Iterable[Mapping[str, object]]) -> Iterator[str]:
    r"""Serialize record mappings into per-line compact JSON strings.

    Args:
        records: Mappings to serialize, one per line.

    Yields:
        One JSON string per record (no trailing newline).
    """
    for record in records:
        yield json.dumps(
            record, ensure_ascii=False, allow_nan=False, separators=_COMPACT_SEPARATORS
        )
