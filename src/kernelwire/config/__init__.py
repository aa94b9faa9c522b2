# topmark:header:start
#
#   project      : KernelWire
#   file         : __init__.py
#   file_relpath : src/kernelwire/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for KernelWire.

- ``model``: the frozen `EncoderConfig`.
- ``loaders``: TOML loading (``pyproject.toml`` / ``kernelwire.toml``) via tomlkit.
- ``logging``: TRACE-aware, chalk-colored logging setup.
"""

from __future__ import annotations

from kernelwire.config.loaders import load_encoder_config
from kernelwire.config.model import DEFAULT_CONFIG, EncoderConfig

__all__ = [
    "DEFAULT_CONFIG",
    "EncoderConfig",
    "load_encoder_config",
]
