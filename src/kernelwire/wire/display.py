# topmark:header:start
#
#   project      : KernelWire
#   file         : display.py
#   file_relpath : src/kernelwire/wire/display.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rich-display payload encoding.

A rich-display payload is a JSON object keyed by MIME type. Most producers hand
over opaque text (plain text, HTML, base64 images), which is embedded verbatim
as a JSON string. A fixed set of MIME types carries text that is *already JSON*
(generic JSON and chart specifications); for those the text is parsed and the
resulting value is embedded directly.

The distinction is made by MIME tag through `JSON_REPARSED_MIME_TYPES`, never by
sniffing the content.

Parse failures (syntax errors, ``NaN``/``Infinity`` literals, nesting too deep to
decode):
  - default: the entry becomes ``""`` and a warning is logged (switch the warning
    off with `EncoderConfig.warn_on_malformed_payload`);
  - `EncoderConfig.strict_payloads`: `MalformedPayloadError` is raised instead.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final

from kernelwire.config.logging import get_logger
from kernelwire.config.model import DEFAULT_CONFIG
from kernelwire.core.errors import MalformedPayloadError
from kernelwire.core.keys import WireValue
from kernelwire.protocol.types import MimeType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kernelwire.config.logging import KernelWireLogger
    from kernelwire.config.model import EncoderConfig
    from kernelwire.protocol.types import DisplayData

logger: KernelWireLogger = get_logger(__name__)

# MIME types whose payload text is pre-serialized JSON.
JSON_REPARSED_MIME_TYPES: Final[frozenset[MimeType]] = frozenset(
    {
        MimeType.JSON,
        MimeType.VEGA,
        MimeType.VEGALITE,
    }
)
_JSON_REPARSED_KEYS: Final[frozenset[str]] = frozenset(m.value for m in JSON_REPARSED_MIME_TYPES)


def is_json_reparsed(mime: MimeType | str) -> bool:
    """Return True when payloads tagged with ``mime`` must be parsed as JSON.

    Plain strings equal to a table entry's wire spelling match as well.
    """
    return _mime_key(mime) in _JSON_REPARSED_KEYS


def _mime_key(mime: MimeType | str) -> str:
    return mime.value if isinstance(mime, MimeType) else str(mime)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-JSON literal {name}")


def _parse_json_payload(mime: str, text: str, config: EncoderConfig) -> Any:
    # NaN and Infinity are rejected; deep nesting surfaces as RecursionError.
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        if config.strict_payloads:
            raise MalformedPayloadError(mime, str(exc)) from exc
        if config.warn_on_malformed_payload:
            logger.warning(
                "Malformed JSON payload for %s (%s); substituting an empty string", mime, exc
            )
        return WireValue.EMPTY


def encode_display_entry(
    item: DisplayData,
    *,
    config: EncoderConfig | None = None,
) -> tuple[str, Any]:
    """Encode one `DisplayData` into a ``(mime key, JSON value)`` pair.

    Args:
        item: The representation to encode.
        config: Encoder options; defaults to `DEFAULT_CONFIG`.

    Returns:
        The MIME key and either the parsed JSON value (for re-parsed MIME types)
        or the verbatim payload text.

    Raises:
        MalformedPayloadError: Only with ``config.strict_payloads`` and unparsable text.
    """
    cfg: EncoderConfig = config or DEFAULT_CONFIG
    key: str = _mime_key(item.mime)
    if is_json_reparsed(item.mime):
        return key, _parse_json_payload(key, item.data, cfg)
    return key, item.data


def encode_display_data(
    items: Iterable[DisplayData],
    *,
    config: EncoderConfig | None = None,
) -> dict[str, Any]:
    """Encode a collection of representations into a MIME-keyed JSON object.

    Later entries with an already-seen MIME key replace earlier ones.

    Args:
        items: Representations of one logical output.
        config: Encoder options; defaults to `DEFAULT_CONFIG`.

    Returns:
        ``{mime: value}`` ready to embed under a ``data`` key.

    Raises:
        MalformedPayloadError: Only with ``config.strict_payloads`` and unparsable text.
    """
    out: dict[str, Any] = {}
    for item in items:
        key, value = encode_display_entry(item, config=config)
        out[key] = value
    return out
