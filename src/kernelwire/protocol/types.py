# topmark:header:start
#
#   project      : KernelWire
#   file         : types.py
#   file_relpath : src/kernelwire/protocol/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types embedded in kernel protocol message content.

Sections:
    * Vocabularies (`KeyedStrEnum`): `ExecutionState`, `StreamType`, `ReplyStatus`,
      `ReviewStatus`, `MimeType`, `MessageType`, `Channel`.
    * Immutable records: `LanguageInfo`, `DisplayData`, `HistoryReplyElement`,
      `CodeReview`.

All records are frozen; they are built upstream and consumed once by the encoder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from kernelwire.core.enum_mixins import KeyedStrEnum

# Any value that `json.dumps` accepts once mappings/sequences are normalized.
JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]


class ExecutionState(KeyedStrEnum):
    """Kernel activity reported by ``status`` broadcasts."""

    BUSY = ("busy", "Kernel is processing a request")
    IDLE = ("idle", "Kernel is waiting for requests")
    STARTING = ("starting", "Kernel is starting up")


class StreamType(KeyedStrEnum):
    """Stream a piece of captured output came from."""

    STDIN = ("stdin", "Standard input")
    STDOUT = ("stdout", "Standard output")


class ReplyStatus(KeyedStrEnum):
    """Outcome reported by ``kernel_info_reply`` and ``execute_reply``."""

    OK = ("ok", "Request succeeded")
    ERROR = ("error", "Request failed")
    ABORT = ("abort", "Request was aborted")


class ReviewStatus(KeyedStrEnum):
    """Outcome of a syntax-completeness check (``is_complete_reply``)."""

    COMPLETE = ("complete", "Code is ready to execute")
    INCOMPLETE = ("incomplete", "Code needs more input")
    INVALID = ("invalid", "Code can never be completed")
    UNKNOWN = ("unknown", "Completeness cannot be determined")


class MimeType(KeyedStrEnum):
    """Well-known MIME types of rich-display representations.

    Custom MIME types are passed to `DisplayData` as plain strings.
    """

    PLAIN_TEXT = ("text/plain", "Plain text")
    HTML = ("text/html", "HTML fragment")
    MARKDOWN = ("text/markdown", "Markdown text")
    LATEX = ("text/latex", "LaTeX source")
    PNG = ("image/png", "Base64 PNG image")
    JPEG = ("image/jpeg", "Base64 JPEG image")
    SVG = ("image/svg+xml", "SVG image")
    JAVASCRIPT = ("application/javascript", "JavaScript code")
    JSON = ("application/json", "Generic JSON document")
    VEGA = ("application/vnd.vega.v5+json", "Vega chart specification")
    VEGALITE = ("application/vnd.vegalite.v4+json", "Vega-Lite chart specification")
    WIDGET = ("application/vnd.jupyter.widget-view+json", "Jupyter widget view reference")


class Channel(KeyedStrEnum):
    """Socket a message kind travels on."""

    SHELL = ("shell", "Request/reply channel")
    IOPUB = ("iopub", "Broadcast channel for side effects", ("pub",))
    STDIN = ("stdin", "Kernel-to-frontend input requests")
    CONTROL = ("control", "Priority request/reply channel", ("ctrl",))


class MessageType(KeyedStrEnum):
    """Protocol ``msg_type`` of each outbound message kind."""

    KERNEL_INFO_REPLY = ("kernel_info_reply", "Kernel and language identification")
    COMM_INFO_REPLY = ("comm_info_reply", "Open comms and their targets")
    EXECUTE_REQUEST = ("execute_request", "Request to execute code")
    EXECUTE_REPLY = ("execute_reply", "Result status of an execution")
    STATUS = ("status", "Kernel execution state broadcast")
    STREAM = ("stream", "Captured stream output")
    DISPLAY_DATA = ("display_data", "Rich display output")
    EXECUTE_RESULT = ("execute_result", "Plain-text result of an execution")
    EXECUTE_INPUT = ("execute_input", "Re-broadcast of executed code")
    COMPLETE_REPLY = ("complete_reply", "Completion candidates")
    INSPECT_REPLY = ("inspect_reply", "Object introspection")
    SHUTDOWN_REPLY = ("shutdown_reply", "Acknowledgement of shutdown")
    CLEAR_OUTPUT = ("clear_output", "Request to clear output")
    INPUT_REQUEST = ("input_request", "Request for user input")
    COMM_OPEN = ("comm_open", "Open a comm")
    COMM_MSG = ("comm_msg", "Data on an open comm")
    COMM_CLOSE = ("comm_close", "Close a comm")
    HISTORY_REPLY = ("history_reply", "Execution history entries")
    IS_COMPLETE_REPLY = ("is_complete_reply", "Code completeness verdict")


@dataclass(frozen=True, slots=True)
class LanguageInfo:
    """Description of the language implemented by the kernel.

    Attributes:
        name: Language name, e.g. ``"haskell"``.
        version: Language version string.
        file_extension: Source file extension including the dot.
        codemirror_mode: Editor-mode hint for front-end syntax support.
        pygments_lexer: Name of the syntax-highlighting lexer.
    """

    name: str
    version: str
    file_extension: str
    codemirror_mode: str
    pygments_lexer: str


@dataclass(frozen=True, slots=True)
class DisplayData:
    """One renderable representation of a result: a MIME type and its payload text."""

    mime: MimeType | str
    data: str


@dataclass(frozen=True, slots=True)
class HistoryReplyElement:
    """One history entry.

    ``output is None`` means no output was recorded for the entry.
    """

    session: int
    line_number: int
    input: str
    output: str | None = None

@dataclass(frozen=True, slots=True)
class CodeReview:
    """Outcome of a completeness check on a code fragment.

    Invariant: ``indent`` is a string for `ReviewStatus.INCOMPLETE` and ``None``
    for every other status.

    Raises:
        ValueError: On construction with a status/indent combination that breaks
            the invariant.
    """

    status: ReviewStatus
    indent: str | None = None

    def __post_init__(self) -> None:
        if self.status is ReviewStatus.INCOMPLETE:
            if self.indent is None:
                raise ValueError("An incomplete code review requires an indent string")
        elif self.indent is not None:
            raise ValueError(f"Only incomplete code reviews carry an indent, not {self.status}")

    @classmethod
    def complete(cls) -> CodeReview:
        return cls(ReviewStatus.COMPLETE)

    @classmethod
    def incomplete(cls, indent: str) -> CodeReview:
        return cls(ReviewStatus.INCOMPLETE, indent)

    @classmethod
    def invalid(cls) -> CodeReview:
        return cls(ReviewStatus.INVALID)

    @classmethod
    def unknown(cls) -> CodeReview:
        return cls(ReviewStatus.UNKNOWN)
