"""Parser limits and their YAML loading."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import IO, Any, Union

from .exceptions import ConfigurationError
from .utils import load_yaml

DEFAULT_MAX_ENTRIES = 1000
DEFAULT_MAX_ARRAY_ELEMENTS = 100
DEFAULT_MAX_KEY_LENGTH = 256
DEFAULT_MAX_VALUE_LENGTH = 1024


@dataclass(frozen=True)
class ParserLimits:
    """Size ceilings bounding a parse session's memory and iteration cost."""

    max_entries: int = DEFAULT_MAX_ENTRIES
    max_array_elements: int = DEFAULT_MAX_ARRAY_ELEMENTS
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass; `max_entries: true` is a typo, not a limit
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"Limit '{f.name}' must be a positive integer, got {value!r}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ParserLimits":
        """Build limits from a mapping holding any subset of the limit names.

        Args:
            data: Mapping of limit name to value  # (None means all defaults)

        Returns:
            Limits with unspecified names left at their defaults

        Raises:
            ConfigurationError: If the mapping is not a mapping or names an unknown limit
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigurationError(f"Limits must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(name) for name in set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown limits: {', '.join(unknown)}")
        return cls(**dict(data))


def load_limits(source: Union[str, Path, IO[str]]) -> ParserLimits:
    """Load parser limits from a YAML file path or an open stream.

    Args:
        source: Path to a YAML file, or a file-like object

    Returns:
        Parsed limits
    """
    if isinstance(source, (str, Path)):
        with open(source, "r", encoding="utf-8") as f:
            data = load_yaml(f)
    else:
        data = load_yaml(source)
    return ParserLimits.from_mapping(data)
