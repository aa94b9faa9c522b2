# topmark:header:start
#
#   project      : KernelWire
#   file         : values.py
#   file_relpath : src/kernelwire/wire/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leaf encoders for auxiliary values embedded in message content.

Each encoder is a pure, total function; none of them depends on another
encoder module, so every other part of `kernelwire.wire` may call them.

Pass-through rules (`encode_json_value`):
  - `Enum` -> `Enum.value`
  - `Mapping` -> `dict[str, encoded value]`
  - `list/tuple` -> `list[encoded item]`
  - anything else is returned unchanged
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

from kernelwire.core.keys import WireKey, WireValue

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kernelwire.protocol.types import (
        ExecutionState,
        LanguageInfo,
        ReplyStatus,
        ReviewStatus,
        StreamType,
    )


def encode_execution_state(state: ExecutionState) -> str:
    """Return ``"busy"``, ``"idle"`` or ``"starting"``."""
    return state.value


def encode_stream_type(stream: StreamType) -> str:
    """Return ``"stdin"`` or ``"stdout"``."""
    return stream.value


def encode_reply_status(status: ReplyStatus) -> str:
    """Return ``"ok"``, ``"error"`` or ``"abort"``."""
    return status.value


def encode_review_status(status: ReviewStatus) -> str:
    """Return ``"complete"``, ``"incomplete"``, ``"invalid"`` or ``"unknown"``."""
    return status.value


def encode_ok_flag(ok: bool) -> str:
    """Map a success flag to exactly one of ``"ok"`` / ``"error"``."""
    return WireValue.OK if ok else WireValue.ERROR


def encode_language_info(info: LanguageInfo) -> dict[str, str]:
    """Encode the kernel's language description (five keys, verbatim values)."""
    return {
        WireKey.NAME: info.name,
        WireKey.VERSION: info.version,
        WireKey.FILE_EXTENSION: info.file_extension,
        WireKey.CODEMIRROR_MODE: info.codemirror_mode,
        WireKey.PYGMENTS_LEXER: info.pygments_lexer,
    }


def encode_json_value(obj: object) -> Any:
    """Copy a JSON-compatible value into plain `dict` / `list` structures.

    The result never aliases caller-owned containers, so the encoded content can
    be handed to another thread or mutated by the transport safely.

    Args:
        obj: A JSON-compatible value, possibly built from read-only mappings,
            tuples or keyed enums.

    Returns:
        A structure made only of dict, list, str, int, float, bool and None.
    """
    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, Mapping):
        mapping = cast("Mapping[object, Any]", obj)
        return {str(k): encode_json_value(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple)):
        return [encode_json_value(v) for v in cast("Iterable[object]", obj)]

    return obj
