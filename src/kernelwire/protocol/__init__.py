# topmark:header:start
#
#   project      : KernelWire
#   file         : __init__.py
#   file_relpath : src/kernelwire/protocol/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed, immutable representation of kernel protocol message content.

- [`kernelwire.protocol.types`][kernelwire.protocol.types]: vocabularies and
  value records embedded in content.
- [`kernelwire.protocol.messages`][kernelwire.protocol.messages]: the closed set
  of message variants.

Nothing in this package knows about JSON; see `kernelwire.wire` for encoding.
"""

from __future__ import annotations
