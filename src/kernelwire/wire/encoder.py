# topmark:header:start
#
#   project      : KernelWire
#   file         : encoder.py
#   file_relpath : src/kernelwire/wire/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message-content encoder for the kernel messaging protocol.

`encode_message` turns one message variant into the JSON object (a plain `dict`)
the protocol prescribes for its kind. Each variant has exactly one encoder,
registered in an explicit dispatch table keyed by the variant class:

- the table must cover exactly `MESSAGE_CLASSES`; this is checked at import time;
- a value of any other type raises `UnsupportedMessageError` (a wiring defect,
  never swallowed).

Encoders emit exactly the protocol key set of their kind: no extra keys, no
defaulted keys. This module is intentionally console-free and serialization-free
(see `kernelwire.wire.serializers` for strings).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Final, TypeVar

from kernelwire.config.logging import get_logger
from kernelwire.config.model import DEFAULT_CONFIG
from kernelwire.core.errors import UnsupportedMessageError
from kernelwire.core.keys import WireKey, WireValue
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
    PublishDisplayData,
    PublishInput,
    PublishOutput,
    PublishStatus,
    PublishStream,
    RequestInput,
    ShutdownReply,
)
from kernelwire.protocol.types import MimeType, ReviewStatus
from kernelwire.wire.display import encode_display_data
from kernelwire.wire.values import (
    encode_execution_state,
    encode_json_value,
    encode_language_info,
    encode_ok_flag,
    encode_reply_status,
    encode_review_status,
    encode_stream_type,
)

if TYPE_CHECKING:
    from kernelwire.config.logging import KernelWireLogger
    from kernelwire.config.model import EncoderConfig
    from kernelwire.protocol.messages import Message
    from kernelwire.protocol.types import HistoryReplyElement

logger: KernelWireLogger = get_logger(__name__)

Content = dict[str, Any]
_M = TypeVar("_M")
_Encoder = Callable[[Any, "EncoderConfig"], Content]

_ENCODERS: dict[type, _Encoder] = {}


def _encodes(cls: type[_M]) -> Callable[[Callable[[_M, EncoderConfig], Content]], _Encoder]:
    """Register the decorated function as the encoder for message class ``cls``."""

    def _register(fn: Callable[[_M, EncoderConfig], Content]) -> _Encoder:
        if cls in _ENCODERS:
            raise RuntimeError(f"Duplicate encoder for {cls.__name__}")
        _ENCODERS[cls] = fn
        return fn

    return _register


# --- Shell replies and requests ---


@_encodes(KernelInfoReply)
def _kernel_info_reply(msg: KernelInfoReply, config: EncoderConfig) -> Content:
    return {
        WireKey.PROTOCOL_VERSION: msg.protocol_version,
        WireKey.BANNER: msg.banner,
        WireKey.IMPLEMENTATION: msg.implementation,
        WireKey.IMPLEMENTATION_VERSION: msg.implementation_version,
        WireKey.LANGUAGE_INFO: encode_language_info(msg.language_info),
        WireKey.STATUS: encode_reply_status(msg.status),
    }


@_encodes(CommInfoReply)
def _comm_info_reply(msg: CommInfoReply, config: EncoderConfig) -> Content:
    return {
        WireKey.COMMS: {
            comm_id: {WireKey.TARGET_NAME: target} for comm_id, target in msg.comms.items()
        },
        WireKey.STATUS: WireValue.OK,
    }


@_encodes(ExecuteRequest)
def _execute_request(msg: ExecuteRequest, config: EncoderConfig) -> Content:
    return {
        WireKey.CODE: msg.code,
        WireKey.SILENT: msg.silent,
        WireKey.STORE_HISTORY: msg.store_history,
        WireKey.ALLOW_STDIN: msg.allow_stdin,
        WireKey.USER_EXPRESSIONS: encode_json_value(msg.user_expressions),
    }


@_encodes(ExecuteReply)
def _execute_reply(msg: ExecuteReply, config: EncoderConfig) -> Content:
    # An empty pager list yields no payload entry at all, not an empty page.
    payload: list[Content] = []
    if msg.pager_output:
        payload.append(
            {
                WireKey.SOURCE: WireValue.PAGE,
                WireKey.START: 0,
                WireKey.DATA: encode_display_data(msg.pager_output, config=config),
            }
        )
    return {
        WireKey.STATUS: encode_reply_status(msg.status),
        WireKey.EXECUTION_COUNT: msg.execution_count,
        WireKey.PAYLOAD: payload,
        WireKey.USER_EXPRESSIONS: {},
    }


@_encodes(CompleteReply)
def _complete_reply(msg: CompleteReply, config: EncoderConfig) -> Content:
    return {
        WireKey.MATCHES: list(msg.matches),
        WireKey.CURSOR_START: msg.cursor_start,
        WireKey.CURSOR_END: msg.cursor_end,
        WireKey.METADATA: encode_json_value(msg.metadata),
        WireKey.STATUS: encode_ok_flag(msg.ok),
    }


@_encodes(InspectReply)
def _inspect_reply(msg: InspectReply, config: EncoderConfig) -> Content:
    return {
        WireKey.STATUS: encode_ok_flag(msg.found),
        WireKey.DATA: encode_display_data(msg.data, config=config),
        WireKey.METADATA: {},
        WireKey.FOUND: msg.found,
    }


@_encodes(ShutdownReply)
def _shutdown_reply(msg: ShutdownReply, config: EncoderConfig) -> Content:
    return {WireKey.RESTART: msg.restart, WireKey.STATUS: WireValue.OK}


def _history_entry(element: HistoryReplyElement) -> list[Any]:
    # The input is dropped when an output was recorded.
    value: str = element.output if element.output is not None else element.input
    return [element.session, element.line_number, value]


@_encodes(HistoryReply)
def _history_reply(msg: HistoryReply, config: EncoderConfig) -> Content:
    return {
        WireKey.HISTORY: [_history_entry(element) for element in msg.history],
        WireKey.STATUS: WireValue.OK,
    }


@_encodes(IsCompleteReply)
def _is_complete_reply(msg: IsCompleteReply, config: EncoderConfig) -> Content:
    review = msg.review
    out: Content = {WireKey.STATUS: encode_review_status(review.status)}
    if review.status is ReviewStatus.INCOMPLETE:
        out[WireKey.INDENT] = review.indent
    return out


# --- IOPub broadcasts ---


@_encodes(PublishStatus)
def _publish_status(msg: PublishStatus, config: EncoderConfig) -> Content:
    return {WireKey.EXECUTION_STATE: encode_execution_state(msg.execution_state)}


@_encodes(PublishStream)
def _publish_stream(msg: PublishStream, config: EncoderConfig) -> Content:
    return {WireKey.DATA: msg.content, WireKey.NAME: encode_stream_type(msg.stream_type)}


@_encodes(PublishDisplayData)
def _publish_display_data(msg: PublishDisplayData, config: EncoderConfig) -> Content:
    return {
        WireKey.METADATA: {},
        WireKey.DATA: encode_display_data(msg.display_data, config=config),
    }


@_encodes(PublishOutput)
def _publish_output(msg: PublishOutput, config: EncoderConfig) -> Content:
    # Always single-MIME plain text, unlike display_data.
    return {
        WireKey.DATA: {MimeType.PLAIN_TEXT.value: msg.repr_text},
        WireKey.EXECUTION_COUNT: msg.execution_count,
        WireKey.METADATA: {},
    }


@_encodes(PublishInput)
def _publish_input(msg: PublishInput, config: EncoderConfig) -> Content:
    return {WireKey.EXECUTION_COUNT: msg.execution_count, WireKey.CODE: msg.code}


@_encodes(ClearOutput)
def _clear_output(msg: ClearOutput, config: EncoderConfig) -> Content:
    return {WireKey.WAIT: msg.wait}


# --- Stdin ---


@_encodes(RequestInput)
def _request_input(msg: RequestInput, config: EncoderConfig) -> Content:
    return {WireKey.PROMPT: msg.prompt}


# --- Comms ---


@_encodes(CommOpen)
def _comm_open(msg: CommOpen, config: EncoderConfig) -> Content:
    return {
        WireKey.COMM_ID: msg.comm_id,
        WireKey.TARGET_NAME: msg.target_name,
        WireKey.TARGET_MODULE: msg.target_module,
        WireKey.DATA: encode_json_value(msg.data),
    }


@_encodes(CommData)
def _comm_data(msg: CommData, config: EncoderConfig) -> Content:
    return {WireKey.COMM_ID: msg.comm_id, WireKey.DATA: encode_json_value(msg.data)}


@_encodes(CommClose)
def _comm_close(msg: CommClose, config: EncoderConfig) -> Content:
    return {WireKey.COMM_ID: msg.comm_id, WireKey.DATA: encode_json_value(msg.data)}


def _check_dispatch_table() -> None:
    missing = [cls.__name__ for cls in MESSAGE_CLASSES if cls not in _ENCODERS]
    extra = [cls.__name__ for cls in _ENCODERS if cls not in MESSAGE_CLASSES]
    if missing or extra:
        raise RuntimeError(
            f"Message encoder table out of sync: missing={missing!r} extra={extra!r}"
        )


_check_dispatch_table()

ENCODED_MESSAGE_CLASSES: Final[frozenset[type]] = frozenset(_ENCODERS)


def encode_message(message: Message, *, config: EncoderConfig | None = None) -> Content:
    """Encode message content into its protocol JSON object.

    Args:
        message: One of the variants in `MESSAGE_CLASSES`.
        config: Encoder options; defaults to `DEFAULT_CONFIG`.

    Returns:
        A fresh JSON-compatible dict with exactly the key set of the message kind.

    Raises:
        UnsupportedMessageError: If ``message`` is not one of the known variants.
        MalformedPayloadError: Only with ``config.strict_payloads`` and an unparsable
            pre-serialized display payload.
    """
    encoder: _Encoder | None = _ENCODERS.get(type(message))
    if encoder is None:
        logger.error("No encoder for message of type %s", type(message).__qualname__)
        raise UnsupportedMessageError(message)

    logger.trace("Encoding %s", type(message).__name__)
    return encoder(message, config or DEFAULT_CONFIG)
