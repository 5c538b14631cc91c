"""Line classification for INI-style configuration text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .exceptions import MalformedSectionError
from .utils import trim_whitespace

COMMENT_PREFIXES = ("#", ";")


class LineKind(Enum):
    BLANK = auto()
    COMMENT = auto()
    SECTION = auto()
    ASSIGNMENT = auto()
    UNRECOGNIZED = auto()


@dataclass(frozen=True)
class ClassifiedLine:
    """One classified line.

    ``section`` is set for SECTION lines; ``key`` and ``raw_value`` for
    ASSIGNMENT lines, both already trimmed.
    """

    kind: LineKind
    text: str
    section: Optional[str] = None
    key: Optional[str] = None
    raw_value: Optional[str] = None


def is_section_header(text: str) -> bool:
    text = trim_whitespace(text)
    return len(text) >= 2 and text[0] == "[" and text[-1] == "]"


def extract_section_name(text: str) -> str:
    """Return the trimmed name between a header's brackets.

    Raises:
        MalformedSectionError: If the name is empty
    """
    name = trim_whitespace(trim_whitespace(text)[1:-1])
    if not name:
        raise MalformedSectionError("Empty section name")
    return name


def split_assignment(text: str) -> tuple[str, str]:
    """Split at the first '=' into a trimmed key and a trimmed raw value."""
    key, _, value = text.partition("=")
    return trim_whitespace(key), trim_whitespace(value)


def classify_line(line: str) -> ClassifiedLine:
    """Classify one line of configuration text.

    Args:
        line: Line without its terminator

    Returns:
        Classified line

    Raises:
        MalformedSectionError: If the line is a section header with an empty name
    """
    text = trim_whitespace(line)
    if not text:
        return ClassifiedLine(LineKind.BLANK, text)
    if text.startswith(COMMENT_PREFIXES):
        return ClassifiedLine(LineKind.COMMENT, text)
    if is_section_header(text):
        return ClassifiedLine(LineKind.SECTION, text, section=extract_section_name(text))
    if "=" in text:
        key, raw_value = split_assignment(text)
        return ClassifiedLine(LineKind.ASSIGNMENT, text, key=key, raw_value=raw_value)
    return ClassifiedLine(LineKind.UNRECOGNIZED, text)
