# topmark:header:start
#
#   project      : KernelWire
#   file         : keys.py
#   file_relpath : src/kernelwire/core/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical JSON field names of the kernel messaging protocol.

Notes:
    - Values are the exact wire spellings; they are fixed by the external,
      versioned protocol and must not drift.
    - Keep this module behavior-free so it can be imported from anywhere.
"""

from __future__ import annotations

from typing import Final


class WireKey:
    """Content field names used by the message encoders."""

    # Shared
    STATUS: Final[str] = "status"
    DATA: Final[str] = "data"
    METADATA: Final[str] = "metadata"
    CODE: Final[str] = "code"
    EXECUTION_COUNT: Final[str] = "execution_count"
    USER_EXPRESSIONS: Final[str] = "user_expressions"

    # kernel_info_reply
    PROTOCOL_VERSION: Final[str] = "protocol_version"
    BANNER: Final[str] = "banner"
    IMPLEMENTATION: Final[str] = "implementation"
    IMPLEMENTATION_VERSION: Final[str] = "implementation_version"
    LANGUAGE_INFO: Final[str] = "language_info"

    # language_info
    NAME: Final[str] = "name"
    VERSION: Final[str] = "version"
    FILE_EXTENSION: Final[str] = "file_extension"
    CODEMIRROR_MODE: Final[str] = "codemirror_mode"
    PYGMENTS_LEXER: Final[str] = "pygments_lexer"

    # comm_info_reply / comm_*
    COMMS: Final[str] = "comms"
    COMM_ID: Final[str] = "comm_id"
    TARGET_NAME: Final[str] = "target_name"
    TARGET_MODULE: Final[str] = "target_module"

    # execute_request
    SILENT: Final[str] = "silent"
    STORE_HISTORY: Final[str] = "store_history"
    ALLOW_STDIN: Final[str] = "allow_stdin"

    # execute_reply payloads
    PAYLOAD: Final[str] = "payload"
    SOURCE: Final[str] = "source"
    START: Final[str] = "start"

    # status / stream
    EXECUTION_STATE: Final[str] = "execution_state"

    # complete_reply
    MATCHES: Final[str] = "matches"
    CURSOR_START: Final[str] = "cursor_start"
    CURSOR_END: Final[str] = "cursor_end"

    # inspect_reply
    FOUND: Final[str] = "found"

    # shutdown_reply / clear_output / input_request
    RESTART: Final[str] = "restart"
    WAIT: Final[str] = "wait"
    PROMPT: Final[str] = "prompt"

    # history_reply / is_complete_reply
    HISTORY: Final[str] = "history"
    INDENT: Final[str] = "indent"


class WireValue:
    """Fixed string values that appear inside encoded content."""

    OK: Final[str] = "ok"
    ERROR: Final[str] = "error"
    PAGE: Final[str] = "page"
    EMPTY: Final[str] = ""


class RecordKey:
    """Keys of the wire record built by `kernelwire.wire.shapes.build_wire_record`."""

    MSG_TYPE: Final[str] = "msg_type"
    CHANNEL: Final[str] = "channel"
    CONTENT: Final[str] = "content"
