# topmark:header:start
#
#   project      : KernelWire
#   file         : errors.py
#   file_relpath : src/kernelwire/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by KernelWire.

Usage:
    Catch ``KernelWireError`` to handle every library failure at once. The
    subclasses also derive from the matching builtin (``TypeError`` /
    ``ValueError``) so callers that already guard on those keep working.
"""

from __future__ import annotations


class KernelWireError(Exception):
    """Base class for all KernelWire errors."""


class UnsupportedMessageError(KernelWireError, TypeError):
    """A value outside the closed message set reached the encoder.

    This signals a wiring defect upstream (a new message kind without an
    encoder, or a non-message object), never a runtime input problem.
    """

    def __init__(self, value: object) -> None:
        self.value_type: type = type(value)
        super().__init__(
            f"Do not know how to encode message of type "
            f"{self.value_type.__module__}.{self.value_type.__qualname__}: {value!r}"
        )


class MalformedPayloadError(KernelWireError, ValueError):
    """A pre-serialized rich-display payload is not valid JSON (strict mode only)."""

    def __init__(self, mime: str, reason: str) -> None:
        self.mime: str = mime
        super().__init__(f"Payload for MIME type {mime!r} is not valid JSON: {reason}")


class ConfigError(KernelWireError):
    """Error for configuration errors (missing/invalid/malformed config)."""
