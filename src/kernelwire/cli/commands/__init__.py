# topmark:header:start
#
#   project      : KernelWire
#   file         : __init__.py
#   file_relpath : src/kernelwire/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KernelWire CLI subcommands."""

from __future__ import annotations
