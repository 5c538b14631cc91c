"""Configuration validation module."""

from typing import Optional

from .exceptions import ErrorKind, ValidationFailureError, ValidationIssue
from .limits import ParserLimits
from .store import ConfigStore, Entry
from .utils import is_valid_identifier
from .values import ArrayValue, StringValue


class ConfigValidator:
    """Fail-fast validator for stored entries against syntax and size limits."""

    def __init__(self, limits: Optional[ParserLimits] = None):
        """Initialize validator.

        Args:
            limits: Size limits to check against  # (defaults when omitted)
        """
        self.limits = limits or ParserLimits()

    def validate(self, store: ConfigStore) -> None:
        """Validate every entry in insertion order.

        Args:
            store: Store to validate

        Raises:
            ValidationFailureError: For the first violation found
        """
        issue = self.find_violation(store)
        if issue is not None:
            raise ValidationFailureError(issue)

    def find_violation(self, store: ConfigStore) -> Optional[ValidationIssue]:
        """Return the first violation in the store, or None if every entry is valid."""
        for entry in store:
            issue = self.check_entry(entry)
            if issue is not None:
                return issue
        return None

    def check_entry(self, entry: Entry) -> Optional[ValidationIssue]:
        """Check a single entry.

        The key is checked first, then the value, then the section.

        Args:
            entry: Entry to check

        Returns:
            The entry's violation, or None
        """
        if not self.is_valid_key(entry.key):
            return ValidationIssue(
                kind=ErrorKind.INVALID_KEY,
                key=entry.key,
                section=entry.section,
                detail=self._describe_name_problem(entry.key),
            )

        value_issue = self._check_value(entry)
        if value_issue is not None:
            return value_issue

        if not self.is_valid_section(entry.section):
            return ValidationIssue(
                kind=ErrorKind.MALFORMED_SECTION,
                key=entry.key,
                section=entry.section,
                detail=self._describe_name_problem(entry.section or ""),
            )
        return None

    def is_valid_key(self, key: str) -> bool:
        return is_valid_identifier(key, self.limits.max_key_length)

    def is_valid_section(self, section: Optional[str]) -> bool:
        """Check a section name; None (the global section) is always valid."""
        if section is None:
            return True
        return is_valid_identifier(section, self.limits.max_key_length)

    def _check_value(self, entry: Entry) -> Optional[ValidationIssue]:
        value = entry.value
        if isinstance(value, StringValue) and len(value.value) > self.limits.max_value_length:
            return ValidationIssue(
                kind=ErrorKind.VALUE_TOO_LONG,
                key=entry.key,
                section=entry.section,
                detail=f"string of {len(value.value)} characters exceeds {self.limits.max_value_length}",
            )
        if isinstance(value, ArrayValue) and len(value) == 0:
            return ValidationIssue(
                kind=ErrorKind.UNPARSABLE_VALUE,
                key=entry.key,
                section=entry.section,
                detail="empty array",
            )
        if isinstance(value, ArrayValue) and len(value) > self.limits.max_array_elements:
            return ValidationIssue(
                kind=ErrorKind.ARRAY_SIZE_EXCEEDED,
                key=entry.key,
                section=entry.section,
                detail=f"array of {len(value)} elements exceeds {self.limits.max_array_elements}",
            )
        return None

    def _describe_name_problem(self, name: str) -> str:
        if not name:
            return "empty name"
        if len(name) > self.limits.max_key_length:
            return f"longer than {self.limits.max_key_length} characters"
        return "must start with a letter or underscore and contain only letters, digits, '_' or '.'"
