# topmark:header:start
#
#   project      : KernelWire
#   file         : __main__.py
#   file_relpath : src/kernelwire/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running KernelWire via ``python -m kernelwire``.

Delegates to :func:`kernelwire.cli.main.cli`, the same entry point as the
``kernelwire`` console script.
"""

from __future__ import annotations

from kernelwire.cli.main import cli

if __name__ == "__main__":
    cli()
