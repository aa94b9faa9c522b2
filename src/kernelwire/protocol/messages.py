# topmark:header:start
#
#   project      : KernelWire
#   file         : messages.py
#   file_relpath : src/kernelwire/protocol/messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The closed set of outbound message-content variants.

Each variant is a frozen dataclass carrying only the fields of its message kind,
plus two class-level attributes used by the transport layer:

- ``MSG_TYPE``: the protocol ``msg_type`` (a `MessageType`).
- ``CHANNEL``: the socket the message travels on (a `Channel`).

`Message` is the union of all variants and `MESSAGE_CLASSES` lists them; the
encoder in [`kernelwire.wire.encoder`][kernelwire.wire.encoder] handles exactly
this set. Adding a variant here without an encoder fails at import time.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Union, get_args

from kernelwire.protocol.types import (
    Channel,
    CodeReview,
    DisplayData,
    ExecutionState,
    HistoryReplyElement,
    JsonValue,
    LanguageInfo,
    MessageType,
    ReplyStatus,
    StreamType,
)

# --- Shell replies and requests ---


@dataclass(frozen=True, slots=True)
class KernelInfoReply:
    """Reply to ``kernel_info_request``."""

    MSG_TYPE: ClassVar[MessageType] = MessageType.KERNEL_INFO_REPLY
    CHANNEL: ClassVar[Channel] = Channel.SHELL

    protocol_version: str
    banner: str
    implementation: str
    implementation_version: str
    language_info: LanguageInfo
    status: ReplyStatus


@dataclass(frozen=True, slots=True)
class CommInfoReply:
    """Reply to ``comm_info_request``.

    Attributes:
        comms: Mapping from comm id to the comm's target name.
    """

    MSG_TYPE: ClassVar[MessageType] = MessageType.COMM_INFO_REPLY
    CHANNEL: ClassVar[Channel] = Channel.SHELL

    comms: Mapping[str, str]


@dataclass(frozen=True, slots=True)
class ExecuteRequest:
    """Request to execute code."""

    MSG_TYPE: ClassVar[MessageType] = MessageType.EXECUTE_REQUEST
    CHANNEL: ClassVar[Channel] = Channel.SHELL

    code: str
    silent: bool
    store_history: bool
    allow_stdin: bool
    user_expressions: Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class ExecuteReply:
    """Reply to ``execute_request``.

    Attributes:
        status: Execution outcome.
        execution_count: Counter value of the execution.
        pager_output: Rich representations to show in the front-end pager; empty
            when there is nothing to page.
    """

    MSG_TYPE: ClassVar[MessageType] = MessageType.EXECUTE_REPLY
    CHANNEL: ClassVar[Channel] = Channel.SHELL

    status: ReplyStatus
    execution_count: int
    pager_output: Sequence[DisplayData] = ()


@dataclass(frozen=True, slots=True)
class CompleteReply:
    """Reply to ``complete_request``; ``ok`` is False when completion failed."""

    MSG_TYPE: ClassVar[MessageType] = MessageType.COMPLETE_REPLY
    CHANNEL: ClassVar[Channel] = Channel.SHELL

    matches: Sequence[str]
    cursor_start: int
    cursor_end: int
    metadata: Mapping[str, Any]
    ok: bool


@dataclass(frozen=True, slots=True)
class InspectReply:
    """Reply to ``inspect_request``; ``found`` doubles as the ok/error status."""

    MSG_TYPE: ClassVar[MessageType] = MessageType.INSPECT_REPLY
    CHANNEL: ClassVar[Channel] = Channel.SHELL

    found: bool
    data: Sequence[DisplayData]


@dataclass(frozen=True, slots=True)
class ShutdownReply:
    MSG_TYPE: ClassVar[MessageType] = MessageType.SHUTDOWN_REPLY
    CHANNEL: ClassVar[Channel] = Channel.CONTROL

    restart: bool


@dataclass(frozen=True, slots=True)
class HistoryReply:
    MSG_TYPE: ClassVar[MessageType] = MessageType.HISTORY_REPLY
    CHANNEL: ClassVar[Channel] = Channel.SHELL

    history: Sequence[HistoryReplyElement]


@dataclass(frozen=True, slots=True)
class IsCompleteReply:
    MSG_TYPE: ClassVar[MessageType] = MessageType.IS_COMPLETE_REPLY
    CHANNEL: ClassVar[Channel] = Channel.SHELL

    review: CodeReview


# --- IOPub broadcasts ---


@dataclass(frozen=True, slots=True)
class PublishStatus:
    MSG_TYPE: ClassVar[MessageType] = MessageType.STATUS
    CHANNEL: ClassVar[Channel] = Channel.IOPUB

    execution_state: ExecutionState


@dataclass(frozen=True, slots=True)
class PublishStream:
    MSG_TYPE: ClassVar[MessageType] = MessageType.STREAM
    CHANNEL: ClassVar[Channel] = Channel.IOPUB

    stream_type: StreamType
    content: str


@dataclass(frozen=True, slots=True)
class PublishDisplayData:
    MSG_TYPE: ClassVar[MessageType] = MessageType.DISPLAY_DATA
    CHANNEL: ClassVar[Channel] = Channel.IOPUB

    display_data: Sequence[DisplayData]


@dataclass(frozen=True, slots=True)
class PublishOutput:
    """Plain-text execution result (``execute_result``)."""

    MSG_TYPE: ClassVar[MessageType] = MessageType.EXECUTE_RESULT
    CHANNEL: ClassVar[Channel] = Channel.IOPUB

    execution_count: int
    repr_text: str


@dataclass(frozen=True, slots=True)
class PublishInput:
    """Re-broadcast of the code being executed (``execute_input``)."""

    MSG_TYPE: ClassVar[MessageType] = MessageType.EXECUTE_INPUT
    CHANNEL: ClassVar[Channel] = Channel.IOPUB

    execution_count: int
    code: str


@dataclass(frozen=True, slots=True)
class ClearOutput:
    MSG_TYPE: ClassVar[MessageType] = MessageType.CLEAR_OUTPUT
    CHANNEL: ClassVar[Channel] = Channel.IOPUB

    wait: bool


# --- Stdin ---


@dataclass(frozen=True, slots=True)
class RequestInput:
    MSG_TYPE: ClassVar[MessageType] = MessageType.INPUT_REQUEST
    CHANNEL: ClassVar[Channel] = Channel.STDIN

    prompt: str


# --- Comms ---


@dataclass(frozen=True, slots=True)
class CommOpen:
    """Open a comm; carries the target identification besides the comm id."""

    MSG_TYPE: ClassVar[MessageType] = MessageType.COMM_OPEN
    CHANNEL: ClassVar[Channel] = Channel.IOPUB

    comm_id: str
    target_name: str
    target_module: str
    data: JsonValue


@dataclass(frozen=True, slots=True)
class CommData:
    MSG_TYPE: ClassVar[MessageType] = MessageType.COMM_MSG
    CHANNEL: ClassVar[Channel] = Channel.IOPUB

    comm_id: str
    data: JsonValue


@dataclass(frozen=True, slots=True)
class CommClose:
    MSG_TYPE: ClassVar[MessageType] = MessageType.COMM_CLOSE
    CHANNEL: ClassVar[Channel] = Channel.IOPUB

    comm_id: str
    data: JsonValue


Message = Union[
    KernelInfoReply,
    CommInfoReply,
    ExecuteRequest,
    ExecuteReply,
    PublishStatus,
    PublishStream,
    PublishDisplayData,
    PublishOutput,
    PublishInput,
    CompleteReply,
    InspectReply,
    ShutdownReply,
    ClearOutput,
    RequestInput,
    CommOpen,
    CommData,
    CommClose,
    HistoryReply,
    IsCompleteReply,
]

MESSAGE_CLASSES: tuple[type, ...] = get_args(Message)
