# topmark:header:start
#
#   project      : KernelWire
#   file         : __init__.py
#   file_relpath : src/kernelwire/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KernelWire command-line interface (Click).

If it imports `click` or prints, it belongs here rather than in `kernelwire.wire`.
"""

from __future__ import annotations
