# topmark:header:start
#
#   project      : KernelWire
#   file         : constants.py
#   file_relpath : src/kernelwire/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KernelWire Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

KERNELWIRE: str = "kernelwire"
KERNELWIRE_VERSION: str = get_version("kernelwire")

# Messaging protocol version implemented by the encoder.
PROTOCOL_VERSION: str = "5.0"

# Environment variable consulted by `kernelwire.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: str = "KERNELWIRE_LOG_LEVEL"

# Config discovery
PYPROJECT_TOML_NAME: str = "pyproject.toml"
KERNELWIRE_TOML_NAME: str = "kernelwire.toml"
