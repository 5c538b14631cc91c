"""TypedConf parser module."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .exceptions import (
    ConfigParseError,
    ErrorKind,
    InvalidKeyError,
    InvalidSyntaxError,
    SessionAbortedError,
    ValidationFailureError,
)
from .inference import parse_value
from .limits import ParserLimits
from .lines import LineKind, classify_line
from .store import ConfigStore, Entry
from .validation import ConfigValidator
from .values import ConfigValue

logger = logging.getLogger(__name__)

# Errors that drop the offending entry but are never silently swallowed.
LIMIT_ERRORS = frozenset({ErrorKind.CAPACITY_EXCEEDED, ErrorKind.ARRAY_SIZE_EXCEEDED})


class ParserState:
    """Mutable per-session parser state."""

    def __init__(self, strict: bool = False):
        """Initialize parser state.

        Args:
            strict: Abort on the first error instead of skipping bad lines
        """
        self._strict = strict
        self.current_section: Optional[str] = None
        self.line_number = 0
        self.last_error: Optional[str] = None
        self.errors: List[ConfigParseError] = []
        # Set when a strict session stops at an error; no further input is accepted
        self.aborted = False

    @property
    def strict(self) -> bool:
        return self._strict

    def __repr__(self) -> str:
        return (
            f"ParserState(strict={self._strict}, section={self.current_section!r}, "
            f"line={self.line_number}, errors={len(self.errors)}, aborted={self.aborted})"
        )


class ConfigSession:
    """One parse session: a store, its parser state, and the typed query API.

    Lines may be fed in several calls; the current section carries over
    between them. Sessions are not thread-safe.
    """

    def __init__(self, strict: bool = False, limits: Optional[ParserLimits] = None):
        """Initialize an empty session.

        Args:
            strict: Raise on the first parse error instead of skipping the line
            limits: Size limits for the store, arrays, keys and strings
        """
        self.limits = limits or ParserLimits()
        self.state = ParserState(strict)
        self.store = ConfigStore(self.limits.max_entries)
        self.validator = ConfigValidator(self.limits)

    @property
    def strict(self) -> bool:
        return self.state.strict

    @property
    def current_section(self) -> Optional[str]:
        return self.state.current_section

    @property
    def ok(self) -> bool:
        """True if no limit error has been recorded so far."""
        return not self.state.errors

    # ------------------------------------------------------------------
    # Feeding input
    # ------------------------------------------------------------------

    def feed_line(self, line: str) -> None:
        """Consume one line of configuration text.

        Args:
            line: Line without its terminator

        Raises:
            ConfigParseError: In strict mode, for any error on this line
            SessionAbortedError: If a strict error already stopped this session
        """
        if self.state.aborted:
            raise SessionAbortedError(self.state.last_error)
        self.state.line_number += 1
        try:
            self._consume(line)
        except ConfigParseError as error:
            error.line_number = self.state.line_number
            self._handle_error(error)

    def feed_lines(self, lines: Iterable[str]) -> None:
        """Consume lines from any iterable, e.g. an open text file."""
        for line in lines:
            self.feed_line(line.rstrip("\r\n"))

    def feed_string(self, text: str) -> None:
        """Consume a whole configuration text."""
        lines = text.split("\n")
        if lines and lines[-1] == "":
            # Trailing newline, not an extra line
            lines.pop()
        self.feed_lines(lines)

    def feed_file(self, path: Union[str, Path]) -> None:
        """Consume a UTF-8 configuration file.

        Raises:
            OSError: If the file cannot be opened or read
        """
        logger.debug("Parsing file %s", path)
        with open(path, "r", encoding="utf-8") as f:
            self.feed_lines(f)

    def _consume(self, line: str) -> None:
        classified = classify_line(line)

        if classified.kind in (LineKind.BLANK, LineKind.COMMENT):
            return

        if classified.kind is LineKind.SECTION:
            self.state.current_section = classified.section
            logger.debug("Entering section [%s] at line %d", classified.section, self.state.line_number)
            return

        if classified.kind is LineKind.UNRECOGNIZED:
            raise InvalidSyntaxError("Invalid syntax: no '=' found")

        if not self.validator.is_valid_key(classified.key):
            raise InvalidKeyError(classified.key)

        value = parse_value(classified.raw_value, max_array_elements=self.limits.max_array_elements)
        self.store.append(Entry(classified.key, value, self.state.current_section))

    def _handle_error(self, error: ConfigParseError) -> None:
        if self.strict:
            self.state.last_error = str(error)
            self.state.aborted = True
            raise error

        if error.kind in LIMIT_ERRORS:
            self.state.last_error = str(error)
            self.state.errors.append(error)
            logger.warning("Dropped entry: %s", error)
        else:
            logger.debug("Skipped line: %s", error)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup(self, key: str) -> Optional[ConfigValue]:
        return self.store.lookup(key)

    def lookup_in_section(self, section: Optional[str], key: str) -> Optional[ConfigValue]:
        return self.store.lookup_in_section(section, key)

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.store.get_string(key, default)

    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        return self.store.get_int(key, default)

    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        return self.store.get_float(key, default)

    def get_bool(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        return self.store.get_bool(key, default)

    def validate(self) -> None:
        """Validate the stored entries.

        Raises:
            ValidationFailureError: For the first invalid entry; its message
                also becomes the session's last error
        """
        issue = self.validator.find_violation(self.store)
        if issue is not None:
            self.state.last_error = issue.format_error_message()
            raise ValidationFailureError(issue)

    def __repr__(self) -> str:
        return f"ConfigSession({self.state!r}, {self.store!r})"


class ConfigParser:
    """Main TypedConf parser class."""

    def __init__(self, strict: bool = False, limits: Optional[ParserLimits] = None):
        """Initialize TypedConf parser.

        Args:
            strict: Raise on the first parse error instead of skipping bad lines
            limits: Size limits applied to every session  # (defaults when omitted)
        """
        self.strict = strict
        self.limits = limits or ParserLimits()

    def new_session(self) -> ConfigSession:
        """Start an empty session with this parser's options."""
        return ConfigSession(strict=self.strict, limits=self.limits)

    def parse_string(self, text: str) -> ConfigSession:
        """Parse a configuration text into a fresh session.

        Raises:
            ConfigParseError: In strict mode, for the first bad line; its
                ``session`` attribute holds the entries parsed before it
        """
        session = self.new_session()
        try:
            session.feed_string(text)
        except ConfigParseError as error:
            error.session = session
            raise
        return session

    def parse_lines(self, lines: Iterable[str]) -> ConfigSession:
        """Parse lines from any iterable into a fresh session."""
        session = self.new_session()
        try:
            session.feed_lines(lines)
        except ConfigParseError as error:
            error.session = session
            raise
        return session

    def parse_file(self, path: Union[str, Path]) -> ConfigSession:
        """Parse a UTF-8 configuration file into a fresh session."""
        session = self.new_session()
        try:
            session.feed_file(path)
        except ConfigParseError as error:
            error.session = session
            raise
        return session
