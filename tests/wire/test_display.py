# topmark:header:start
#
#   project      : KernelWire
#   file         : test_display.py
#   file_relpath : tests/wire/test_display.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for rich-display payload encoding (`kernelwire.wire.display`)."""

from __future__ import annotations

import json
import logging

import pytest

from kernelwire.config.model import EncoderConfig
from kernelwire.core.errors import MalformedPayloadError
from kernelwire.protocol.messages import PublishDisplayData
from kernelwire.protocol.types import DisplayData, MimeType
from kernelwire.wire import display
from kernelwire.wire.display import (
    JSON_REPARSED_MIME_TYPES,
    encode_display_data,
    encode_display_entry,
    is_json_reparsed,
)
from kernelwire.wire.encoder import encode_message
from kernelwire.wire.serializers import serialize_content
from tests.conftest import parametrize


def test_reparse_table_is_the_fixed_json_subset() -> None:
    assert {m.value for m in JSON_REPARSED_MIME_TYPES} == {
        "application/json",
        "application/vnd.vega.v5+json",
        "application/vnd.vegalite.v4+json",
    }


@parametrize(
    ("mime", "expected"),
    [
        (MimeType.JSON, True),
        (MimeType.VEGA, True),
        (MimeType.VEGALITE, True),
        ("application/json", True),
        (MimeType.PLAIN_TEXT, False),
        (MimeType.WIDGET, False),
        ("application/geo+json", False),
    ],
)
def test_is_json_reparsed(mime: MimeType | str, expected: bool) -> None:
    assert is_json_reparsed(mime) is expected


def test_generic_json_is_nested_not_stringified() -> None:
    out = encode_display_data([DisplayData(MimeType.JSON, '{"a":1}')])
    assert out == {"application/json": {"a": 1}}


def test_plain_text_is_embedded_verbatim() -> None:
    out = encode_display_data([DisplayData(MimeType.PLAIN_TEXT, "hi")])
    assert out == {"text/plain": "hi"}


def test_json_looking_text_under_opaque_mime_is_not_parsed() -> None:
    out = encode_display_data([DisplayData(MimeType.HTML, '{"a":1}')])
    assert out == {"text/html": '{"a":1}'}


@parametrize("mime", [MimeType.JSON, MimeType.VEGA, MimeType.VEGALITE])
def test_malformed_json_falls_back_to_empty_string(mime: MimeType) -> None:
    out = encode_display_data([DisplayData(mime, "not json")])
    assert out == {mime.value: ""}


def test_malformed_entry_does_not_affect_siblings() -> None:
    out = encode_message(
        PublishDisplayData(
            display_data=[
                DisplayData(MimeType.PLAIN_TEXT, "fallback"),
                DisplayData(MimeType.JSON, "{broken"),
                DisplayData(MimeType.VEGA, '{"$schema": "v5"}'),
            ]
        )
    )
    assert out["data"] == {
        "text/plain": "fallback",
        "application/json": "",
        "application/vnd.vega.v5+json": {"$schema": "v5"},
    }


def test_parsed_scalars_and_arrays_are_kept() -> None:
    out = encode_display_data(
        [
            DisplayData(MimeType.JSON, "[1, 2, 3]"),
            DisplayData(MimeType.VEGA, '"spec"'),
        ]
    )
    assert out == {"application/json": [1, 2, 3], "application/vnd.vega.v5+json": "spec"}


def test_custom_mime_strings_are_supported() -> None:
    key, value = encode_display_entry(DisplayData("application/x-ihaskell", "raw"))
    assert (key, value) == ("application/x-ihaskell", "raw")


def test_later_duplicate_mime_wins() -> None:
    out = encode_display_data(
        [DisplayData(MimeType.PLAIN_TEXT, "first"), DisplayData(MimeType.PLAIN_TEXT, "second")]
    )
    assert out == {"text/plain": "second"}


def test_empty_collection_encodes_to_empty_object() -> None:
    assert encode_display_data([]) == {}


def test_fallback_logs_a_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger=display.__name__):
        encode_display_data([DisplayData(MimeType.JSON, "not json")])
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "application/json" in warnings[0].getMessage()


def test_fallback_warning_can_be_disabled(caplog: pytest.LogCaptureFixture) -> None:
    config = EncoderConfig(warn_on_malformed_payload=False)
    with caplog.at_level(logging.WARNING, logger=display.__name__):
        out = encode_display_data([DisplayData(MimeType.JSON, "not json")], config=config)
    assert out == {"application/json": ""}
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_strict_mode_raises() -> None:
    config = EncoderConfig(strict_payloads=True)
    with pytest.raises(MalformedPayloadError) as excinfo:
        encode_display_data([DisplayData(MimeType.VEGALITE, "{")], config=config)
    assert excinfo.value.mime == "application/vnd.vegalite.v4+json"
    assert isinstance(excinfo.value, ValueError)


def test_strict_mode_accepts_valid_payloads() -> None:
    config = EncoderConfig(strict_payloads=True)
    out = encode_display_data([DisplayData(MimeType.JSON, "{}")], config=config)
    assert out == {"application/json": {}}


DEEPLY_NESTED = "[" * 100_000


@parametrize(
    "text",
    [DEEPLY_NESTED, '{"x": NaN}', "Infinity", "[1, -Infinity]"],
    ids=["deep-nesting", "nan", "infinity", "negative-infinity"],
)
def test_undecodable_payloads_fall_back_to_empty_string(text: str) -> None:
    out = encode_message(
        PublishDisplayData(
            display_data=[
                DisplayData(MimeType.PLAIN_TEXT, "kept"),
                DisplayData(MimeType.JSON, text),
            ]
        )
    )
    assert out["data"] == {"text/plain": "kept", "application/json": ""}


@parametrize(
    "text",
    [DEEPLY_NESTED, '{"x": NaN}', "[1, -Infinity]"],
    ids=["deep-nesting", "nan", "negative-infinity"],
)
def test_strict_mode_raises_for_undecodable_payloads(text: str) -> None:
    config = EncoderConfig(strict_payloads=True)
    with pytest.raises(MalformedPayloadError) as excinfo:
        encode_display_data([DisplayData(MimeType.VEGA, text)], config=config)
    assert excinfo.value.mime == "application/vnd.vega.v5+json"


def test_non_json_literals_never_reach_serialized_output() -> None:
    text = serialize_content(
        PublishDisplayData(display_data=[DisplayData(MimeType.VEGA, '{"x": NaN}')])
    )
    assert "NaN" not in text
    assert json.loads(text) == {"data": {"application/vnd.vega.v5+json": ""}, "metadata": {}}
