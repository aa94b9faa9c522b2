# topmark:header:start
#
#   project      : KernelWire
#   file         : __init__.py
#   file_relpath : src/kernelwire/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across KernelWire.

Included modules:

- ``enum_mixins``
  ``KeyedStrEnum``: string enums whose ``.value`` is the wire spelling, with a
  human label and aliases for parsing.

- ``errors``
  The exception hierarchy rooted at ``KernelWireError``.

- ``keys``
  Canonical JSON field names used by the wire encoders.

- ``formats``
  ``OutputFormat`` for the CLI frontends.

This package stays free of Click, console and serialization side effects.
"""

from __future__ import annotations
