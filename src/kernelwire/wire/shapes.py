# topmark:header:start
#
#   project      : KernelWire
#   file         : shapes.py
#   file_relpath : src/kernelwire/wire/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Wire record shaping for the transport layer.

A *wire record* pairs the encoded content with the two facts the header and
framing layers need and would otherwise look up themselves:

Shape:
    `{"msg_type": <msg_type>, "channel": <channel>, "content": <encoded content>}`

This module is intentionally serialization-free (no `json.dumps`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kernelwire.core.errors import UnsupportedMessageError
from kernelwire.core.keys import RecordKey
from kernelwire.protocol.messages import MESSAGE_CLASSES
from kernelwire.wire.encoder import encode_message

if TYPE_CHECKING:
    from kernelwire.config.model import EncoderConfig
    from kernelwire.protocol.messages import Message
    from kernelwire.protocol.types import Channel, MessageType


def _variant_class(message: object) -> Any:
    cls = type(message)
    if cls not in MESSAGE_CLASSES:
        raise UnsupportedMessageError(message)
    return cls


def message_type(message: Message) -> str:
    """Return the protocol ``msg_type`` of ``message`` (e.g. ``"execute_reply"``).

    Raises:
        UnsupportedMessageError: If ``message`` is not a known variant.
    """
    msg_type: MessageType = _variant_class(message).MSG_TYPE
    return msg_type.value


def message_channel(message: Message) -> str:
    """Return the socket channel of ``message`` (``"shell"``, ``"iopub"``, ...).

    Raises:
        UnsupportedMessageError: If ``message`` is not a known variant.
    """
    channel: Channel = _variant_class(message).CHANNEL
    return channel.value


def build_wire_record(message: Message, *, config: EncoderConfig | None = None) -> dict[str, Any]:
    """Build the wire record for ``message``.

    Args:
        message: The message variant to encode.
        config: Encoder options; defaults to `DEFAULT_CONFIG`.

    Returns:
        ``{"msg_type": ..., "channel": ..., "content": ...}``.

    Raises:
        UnsupportedMessageError: If ``message`` is not a known variant.
    """
    return {
        RecordKey.MSG_TYPE: message_type(message),
        RecordKey.CHANNEL: message_channel(message),
        RecordKey.CONTENT: encode_message(message, config=config),
    }
