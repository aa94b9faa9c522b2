# topmark:header:start
#
#   project      : KernelWire
#   file         : test_types.py
#   file_relpath : tests/protocol/test_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for protocol vocabularies, records and the closed message set."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from kernelwire.protocol.messages import MESSAGE_CLASSES, RequestInput, ShutdownReply
from kernelwire.protocol.types import (
    Channel,
    CodeReview,
    HistoryReplyElement,
    MessageType,
    MimeType,
    ReplyStatus,
    ReviewStatus,
)
from tests.conftest import parametrize


@parametrize(
    ("enum_cls", "raw", "expected"),
    [
        (ReplyStatus, "ok", ReplyStatus.OK),
        (ReplyStatus, "OK", ReplyStatus.OK),
        (ReplyStatus, "Abort", ReplyStatus.ABORT),
        (Channel, "pub", Channel.IOPUB),
        (Channel, "CTRL", Channel.CONTROL),
        (MimeType, "vegalite", MimeType.VEGALITE),
        (MimeType, "Plain_Text", MimeType.PLAIN_TEXT),
        (ReplyStatus, "nope", None),
        (ReplyStatus, None, None),
    ],
)
def test_keyed_enum_parse(enum_cls: Any, raw: str | None, expected: object) -> None:
    assert enum_cls.parse(raw) is expected


def test_keyed_enum_string_forms() -> None:
    assert str(Channel.IOPUB) == "iopub"
    assert f"{MessageType.COMM_MSG}" == "comm_msg"
    assert MessageType.COMM_MSG.key == "comm_msg"
    assert MessageType.COMM_MSG.label == "Data on an open comm"


def test_code_review_constructors() -> None:
    assert CodeReview.complete().indent is None
    assert CodeReview.incomplete("    ").indent == "    "
    assert CodeReview.invalid().status is ReviewStatus.INVALID
    assert CodeReview.unknown().status is ReviewStatus.UNKNOWN


def test_incomplete_review_requires_indent() -> None:
    with pytest.raises(ValueError, match="indent"):
        CodeReview(ReviewStatus.INCOMPLETE)


@parametrize("status", [ReviewStatus.COMPLETE, ReviewStatus.INVALID, ReviewStatus.UNKNOWN])
def test_only_incomplete_review_carries_indent(status: ReviewStatus) -> None:
    with pytest.raises(ValueError, match="indent"):
        CodeReview(status, "  ")


def test_history_element_output_is_optional() -> None:
    assert HistoryReplyElement(1, 2, "x").output is None
    assert HistoryReplyElement(1, 2, "x", "").output == ""


def test_records_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        ShutdownReply(restart=False).restart = True  # type: ignore[misc]


def test_message_set_is_closed_and_unique() -> None:
    assert len(MESSAGE_CLASSES) == 19
    assert len({cls.MSG_TYPE for cls in MESSAGE_CLASSES}) == 19
    assert {cls.MSG_TYPE for cls in MESSAGE_CLASSES} == set(MessageType)


def test_channel_assignment() -> None:
    by_channel: dict[Channel, set[str]] = {}
    for cls in MESSAGE_CLASSES:
        by_channel.setdefault(cls.CHANNEL, set()).add(cls.MSG_TYPE.value)
    assert by_channel[Channel.CONTROL] == {"shutdown_reply"}
    assert by_channel[Channel.STDIN] == {"input_request"}
    assert RequestInput.CHANNEL is Channel.STDIN
    assert "status" in by_channel[Channel.IOPUB]
    assert "execute_reply" in by_channel[Channel.SHELL]
