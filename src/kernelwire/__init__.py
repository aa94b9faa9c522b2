# topmark:header:start
#
#   project      : KernelWire
#   file         : __init__.py
#   file_relpath : src/kernelwire/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KernelWire package.

KernelWire is the outbound wire encoder for the Jupyter kernel messaging protocol.
It converts immutable, typed message-content values into the exact JSON objects
that notebook, console and IDE front-ends expect on the wire.

Typical use:
    ```python
    from kernelwire import ExecutionState, PublishStatus, encode_message

    encode_message(PublishStatus(execution_state=ExecutionState.IDLE))
    # {"execution_state": "idle"}
    ```
"""

from __future__ import annotations

from kernelwire.config.model import EncoderConfig
from kernelwire.core.errors import (
    ConfigError,
    KernelWireError,
    MalformedPayloadError,
    UnsupportedMessageError,
)
from kernelwire.protocol.messages import (
    MESSAGE_CLASSES,
    ClearOutput,
    CommClose,
    CommData,
    CommInfoReply,
    CommOpen,
    CompleteReply,
    ExecuteReply,
    ExecuteRequest,
    HistoryReply,
    InspectReply,
    IsCompleteReply,
    KernelInfoReply,
    Message,
    PublishDisplayData,
    PublishInput,
    PublishOutput,
    PublishStatus,
    PublishStream,
    RequestInput,
    ShutdownReply,
)
from kernelwire.protocol.types import (
    Channel,
    CodeReview,
    DisplayData,
    ExecutionState,
    HistoryReplyElement,
    LanguageInfo,
    MessageType,
    MimeType,
    ReplyStatus,
    ReviewStatus,
    StreamType,
)
from kernelwire.wire.display import encode_display_data
from kernelwire.wire.encoder import encode_message
from kernelwire.wire.serializers import serialize_content
from kernelwire.wire.shapes import build_wire_record

__all__ = [
    "MESSAGE_CLASSES",
    "Channel",
    "ClearOutput",
    "CodeReview",
    "CommClose",
    "CommData",
    "CommInfoReply",
    "CommOpen",
    "CompleteReply",
    "ConfigError",
    "DisplayData",
    "EncoderConfig",
    "ExecuteReply",
    "ExecuteRequest",
    "ExecutionState",
    "HistoryReply",
    "HistoryReplyElement",
    "InspectReply",
    "IsCompleteReply",
    "KernelInfoReply",
    "KernelWireError",
    "LanguageInfo",
    "MalformedPayloadError",
    "Message",
    "MessageType",
    "MimeType",
    "PublishDisplayData",
    "PublishInput",
    "PublishOutput",
    "PublishStatus",
    "PublishStream",
    "ReplyStatus",
    "RequestInput",
    "ReviewStatus",
    "ShutdownReply",
    "StreamType",
    "UnsupportedMessageError",
    "build_wire_record",
    "encode_display_data",
    "encode_message",
    "serialize_content",
]
