# topmark:header:start
#
#   project      : KernelWire
#   file         : loaders.py
#   file_relpath : src/kernelwire/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load encoder configuration from TOML files.

Sources:
- ``pyproject.toml``: the ``[tool.kernelwire]`` table.
- any other file (typically ``kernelwire.toml``): the document root.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from kernelwire.config.logging import get_logger
from kernelwire.config.model import DEFAULT_CONFIG, EncoderConfig
from kernelwire.constants import KERNELWIRE, PYPROJECT_TOML_NAME
from kernelwire.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from kernelwire.config.logging import KernelWireLogger

logger: KernelWireLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read a TOML file and return it as a plain dict.

    Args:
        path: TOML file to read.

    Returns:
        The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    return doc.unwrap()


def load_config_table(path: Path) -> dict[str, Any]:
    """Return the KernelWire table from a config file.

    For ``pyproject.toml`` this is ``[tool.kernelwire]`` (empty when absent);
    for any other file it is the whole document.

    Raises:
        ConfigError: If the file cannot be read, is not TOML, or the table is
            not a TOML table.
    """
    data: dict[str, Any] = load_toml_dict(path)
    if path.name != PYPROJECT_TOML_NAME:
        return data

    tool: Any = data.get("tool", {})
    table: Any = tool.get(KERNELWIRE, {}) if isinstance(tool, dict) else {}
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{KERNELWIRE}] in {path} must be a table")
    if not table:
        logger.debug("No [tool.%s] table in %s; using defaults", KERNELWIRE, path)
    return table


def load_encoder_config(path: Path | None = None) -> EncoderConfig:
    """Load an `EncoderConfig`, falling back to defaults when no path is given.

    Args:
        path: Optional ``pyproject.toml`` or ``kernelwire.toml`` file.

    Returns:
        The effective encoder configuration.

    Raises:
        ConfigError: If the file cannot be loaded or holds invalid values.
    """
    if path is None:
        return DEFAULT_CONFIG
    table = load_config_table(path)
    config = EncoderConfig.from_mapping(table)
    logger.debug("Loaded encoder config from %s: %r", path, config)
    return config
