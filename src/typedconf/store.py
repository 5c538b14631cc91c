"""TypedConf configuration store module."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, TypeVar

from .exceptions import CapacityExceededError
from .limits import DEFAULT_MAX_ENTRIES
from .values import BooleanValue, ConfigValue, FloatValue, IntegerValue, StringValue

T = TypeVar("T")

# Sentinel distinguishing "any section" from the global section (None).
ANY_SECTION: Any = object()


@dataclass(frozen=True)
class Entry:
    """One parsed (section, key, value) triple; ``section`` is None for global entries."""

    key: str
    value: ConfigValue
    section: Optional[str] = None

    def __str__(self) -> str:
        prefix = f"[{self.section}] " if self.section is not None else ""
        return f"{prefix}{self.key} = {self.value}"


class ConfigStore:
    """Ordered, append-only collection of configuration entries.

    Duplicate keys are kept side by side; every lookup returns the first
    match in insertion order.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        """Initialize an empty store.

        Args:
            max_entries: Capacity of the store  # (appending beyond it fails)
        """
        self.max_entries = max_entries
        self._entries: List[Entry] = []

    def append(self, entry: Entry) -> None:
        """Append an entry, preserving insertion order.

        Raises:
            CapacityExceededError: If the store is already full
        """
        if len(self._entries) >= self.max_entries:
            raise CapacityExceededError(self.max_entries)
        self._entries.append(entry)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.lookup(key) is not None

    def find(self, key: str, section: Optional[str] = ANY_SECTION) -> Optional[Entry]:
        """Find the first entry with the given key.

        Args:
            key: Exact key to match
            section: Section scope  # (omitted: any section; None: global entries only)

        Returns:
            First matching entry in insertion order, or None
        """
        for entry in self._entries:
            if entry.key != key:
                continue
            if section is ANY_SECTION or entry.section == section:
                return entry
        return None

    def lookup(self, key: str) -> Optional[ConfigValue]:
        """Return the value of the first entry with the given key, in any section."""
        entry = self.find(key)
        return entry.value if entry is not None else None

    def lookup_in_section(self, section: Optional[str], key: str) -> Optional[ConfigValue]:
        """Return the value of the first entry with the given key in exactly ``section``.

        A ``section`` of None matches only global (section-less) entries.
        """
        entry = self.find(key, section)
        return entry.value if entry is not None else None

    def _get_typed(self, key: str, value_class: type, default: T) -> Any:
        value = self.lookup(key)
        if not isinstance(value, value_class):
            return default
        return value.value

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a string value, or ``default`` if absent or not a string."""
        return self._get_typed(key, StringValue, default)

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Get an integer value, or ``default`` if absent or not an integer."""
        return self._get_typed(key, IntegerValue, default)

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        """Get a float value, or ``default`` if absent or not a float.

        Integers are not widened to floats.
        """
        return self._get_typed(key, FloatValue, default)

    def get_bool(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        """Get a boolean value, or ``default`` if absent or not a boolean."""
        return self._get_typed(key, BooleanValue, default)

    def sections(self) -> List[str]:
        """Distinct section names in first-seen order."""
        seen: Dict[str, None] = {}
        for entry in self._entries:
            if entry.section is not None:
                seen.setdefault(entry.section, None)
        return list(seen)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain Python data.

        Returns:
            ``{"global": {...}, "sections": {name: {...}}}`` with plain values  # (first match wins per key)
        """
        global_values: Dict[str, Any] = {}
        section_values: Dict[str, Dict[str, Any]] = {}

        for entry in self._entries:
            if entry.section is None:
                target = global_values
            else:
                target = section_values.setdefault(entry.section, {})
            # Later duplicates are shadowed, as they are for lookups
            target.setdefault(entry.key, entry.value.to_python())

        return {"global": global_values, "sections": section_values}

    def __repr__(self) -> str:
        """String representation."""
        return f"ConfigStore({len(self._entries)} entries)"
