# topmark:header:start
#
#   project      : KernelWire
#   file         : model.py
#   file_relpath : src/kernelwire/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable encoder configuration.

`EncoderConfig` is a frozen dataclass so a single instance can be shared across
threads and encoding calls. It is built either from defaults (`EncoderConfig()`)
or from a TOML table via `EncoderConfig.from_mapping`.

TOML spellings use dashes (``strict-payloads``); snake_case spellings are
accepted as well.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import TYPE_CHECKING, Any, Final

from kernelwire.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class EncoderConfig:
    """Options that tune encoding and serialization.

    Attributes:
        strict_payloads: Raise `MalformedPayloadError` instead of substituting ``""``
            when a pre-serialized JSON display payload cannot be parsed.
        warn_on_malformed_payload: Log a warning when the ``""`` substitution happens.
        sort_keys: Sort object keys when serializing to a string.
        indent: Indentation for serialized output; ``None`` means compact.
    """

    strict_payloads: bool = False
    warn_on_malformed_payload: bool = True
    sort_keys: bool = True
    indent: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain dict keyed by TOML spellings."""
        return {k.replace("_", "-"): v for k, v in asdict(self).items()}

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any]) -> EncoderConfig:
        """Build a config from a TOML table, starting from defaults.

        Args:
            table: Mapping of option names (dash or snake_case spelling) to values.

        Returns:
            EncoderConfig: The resulting configuration.

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type.
        """
        names: list[str] = [f.name for f in fields(cls)]
        known: dict[str, str] = {name: name for name in names}
        known.update({name.replace("_", "-"): name for name in names})

        values: dict[str, Any] = {}
        for raw_key, raw_value in table.items():
            attr = known.get(str(raw_key))
            if attr is None:
                valid = ", ".join(sorted(name.replace("_", "-") for name in names))
                raise ConfigError(f"Unknown config key {raw_key!r} - valid keys: {valid}")
            values[attr] = _coerce(attr, raw_value)
        return cls(**values)


def _coerce(attr: str, value: Any) -> Any:
    if attr == "indent":
        if value is None or (isinstance(value, int) and not isinstance(value, bool)):
            if value is not None and value < 0:
                raise ConfigError(f"Config value {attr!r} must be >= 0, got {value!r}")
            return value
        raise ConfigError(f"Config value {attr!r} must be an integer, got {value!r}")

    if not isinstance(value, bool):
        raise ConfigError(f"Config value {attr!r} must be a boolean, got {value!r}")
    return value


DEFAULT_CONFIG: Final[EncoderConfig] = EncoderConfig()
