"""Custom exceptions for TypedConf."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Category of a parse or validation failure."""

    MALFORMED_SECTION = "MalformedSection"
    INVALID_KEY = "InvalidKey"
    UNPARSABLE_VALUE = "UnparsableValue"
    CAPACITY_EXCEEDED = "CapacityExceeded"
    ARRAY_SIZE_EXCEEDED = "ArraySizeExceeded"
    INVALID_SYNTAX = "InvalidSyntax"
    VALUE_TOO_LONG = "ValueTooLong"
    VALIDATION_FAILURE = "ValidationFailure"


class TypedConfError(Exception):
    """Base exception for TypedConf errors."""

    pass


class ConfigurationError(TypedConfError):
    """Raised when parser limits are misconfigured."""

    pass


class ConfigParseError(TypedConfError):
    """Base class for errors raised while consuming configuration lines.

    The line number is filled in by the session that fed the line, so value
    parsing code can raise these without knowing where the text came from.
    """

    kind: ErrorKind = ErrorKind.INVALID_SYNTAX

    def __init__(self, message: str, line_number: Optional[int] = None):
        """Initialize parse error.

        Args:
            message: Description of the failure  # (without line information)
            line_number: 1-based line where the failure happened, if known
        """
        self.reason = message
        self.line_number = line_number
        # Session holding the entries parsed before the failure, set by ConfigParser
        self.session: Optional[Any] = None
        super().__init__(message)

    def __str__(self) -> str:
        if self.line_number is None:
            return self.reason
        return f"{self.reason} at line {self.line_number}"


class SessionAbortedError(TypedConfError):
    """Raised when feeding a strict session that already stopped at an error."""

    def __init__(self, last_error: Optional[str]):
        self.last_error = last_error
        super().__init__(f"Session aborted after error: {last_error}")


class MalformedSectionError(ConfigParseError):
    """Raised when a section header has an empty name."""

    kind = ErrorKind.MALFORMED_SECTION


class InvalidKeyError(ConfigParseError):
    """Raised when an assignment key breaks the key syntax rule."""

    kind = ErrorKind.INVALID_KEY

    def __init__(self, key: str, line_number: Optional[int] = None):
        self.key = key
        super().__init__(f"Invalid key '{key}'", line_number)


class UnparsableValueError(ConfigParseError):
    """Raised when a raw value cannot be turned into a typed value."""

    kind = ErrorKind.UNPARSABLE_VALUE


class CapacityExceededError(ConfigParseError):
    """Raised when the store already holds the maximum number of entries."""

    kind = ErrorKind.CAPACITY_EXCEEDED

    def __init__(self, max_entries: int, line_number: Optional[int] = None):
        self.max_entries = max_entries
        super().__init__(f"Maximum number of configuration entries ({max_entries}) exceeded", line_number)


class ArraySizeExceededError(ConfigParseError):
    """Raised when an array literal has more elements than allowed."""

    kind = ErrorKind.ARRAY_SIZE_EXCEEDED

    def __init__(self, count: int, max_elements: int, line_number: Optional[int] = None):
        self.count = count
        self.max_elements = max_elements
        super().__init__(f"Array has {count} elements, maximum is {max_elements}", line_number)


class InvalidSyntaxError(ConfigParseError):
    """Raised in strict mode for a line that is not blank, comment, section or assignment."""

    kind = ErrorKind.INVALID_SYNTAX


@dataclass
class ValidationIssue:
    """Represents the first violation found by the validator."""

    kind: ErrorKind
    key: str
    section: Optional[str]
    detail: str

    def format_error_message(self) -> str:
        """Format error message for the violation.

        Returns:
            Formatted error message string
        """
        if self.kind is ErrorKind.MALFORMED_SECTION:
            return f"Invalid section: '{self.section}' ({self.detail})"
        location = f"[{self.section}] " if self.section is not None else ""
        return f"Invalid entry: {location}key='{self.key}' ({self.detail})"


class ValidationFailureError(TypedConfError):
    """Raised when post-parse validation fails."""

    kind = ErrorKind.VALIDATION_FAILURE

    def __init__(self, issue: ValidationIssue):
        """Initialize validation error.

        Args:
            issue: The offending entry's violation
        """
        self.issue = issue
        super().__init__(issue.format_error_message())
