"""Type inference and typed value parsing for raw value strings."""

from __future__ import annotations

import math
import re
from typing import Callable, Dict, List, Optional

from .exceptions import ArraySizeExceededError, UnparsableValueError
from .limits import DEFAULT_MAX_ARRAY_ELEMENTS
from .utils import strip_quotes, trim_whitespace
from .values import (
    ArrayValue,
    BooleanValue,
    ConfigValue,
    FloatValue,
    IntegerValue,
    Scalar,
    StringValue,
    ValueType,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
# Digits in INT64_MIN; longer literals never fit and int() caps digit strings.
INT64_MAX_DIGITS = 19

TRUE_WORDS = frozenset({"true", "yes"})
FALSE_WORDS = frozenset({"false", "no"})

# Explicit ASCII classes: int()/float() alone would also accept "1_000",
# surrounding whitespace, "inf"/"nan" and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_integer(text: str) -> Optional[int]:
    """Parse a whole string as a base-10 signed 64-bit integer.

    Returns:
        The integer, or None if the string is not entirely an integer literal
        or falls outside the 64-bit range
    """
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > INT64_MAX_DIGITS:
        return None
    # Leading zeros count toward int()'s digit cap too
    number = int(digits or "0")
    if text.startswith("-"):
        number = -number
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def parse_float(text: str) -> Optional[float]:
    """Parse a whole string as a decimal floating-point literal.

    Returns:
        The float, or None if the string is not entirely a float literal or
        overflows double precision
    """
    if _FLOAT_RE.fullmatch(text) is None:
        return None
    number = float(text)
    if math.isinf(number):
        return None
    return number


def parse_boolean(text: str) -> Optional[bool]:
    """Parse true/false/yes/no case-insensitively, None for anything else."""
    word = text.lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    return None


def is_array_literal(text: str) -> bool:
    return len(text) >= 2 and text[0] == "[" and text[-1] == "]"


def infer_type(raw: str) -> ValueType:
    """Infer the type of a raw value string.

    Candidates are tried in a fixed precedence order: null, array, boolean,
    integer, float, and string as the fallback.

    Args:
        raw: Raw value string  # (trimmed here as well, callers need not trim)

    Returns:
        Inferred value type
    """
    text = trim_whitespace(raw)
    if not text:
        return ValueType.NULL
    if is_array_literal(text):
        return ValueType.ARRAY
    if parse_boolean(text) is not None:
        return ValueType.BOOLEAN
    if parse_integer(text) is not None:
        return ValueType.INTEGER
    if parse_float(text) is not None:
        return ValueType.FLOAT
    return ValueType.STRING


def _as_boolean(text: str) -> Optional[Scalar]:
    value = parse_boolean(text)
    return None if value is None else BooleanValue(value)


def _as_integer(text: str) -> Optional[Scalar]:
    value = parse_integer(text)
    return None if value is None else IntegerValue(value)


def _as_float(text: str) -> Optional[Scalar]:
    value = parse_float(text)
    return None if value is None else FloatValue(value)


def _as_string(text: str) -> Optional[Scalar]:
    return StringValue(strip_quotes(text))


_SCALAR_PARSERS: Dict[ValueType, Callable[[str], Optional[Scalar]]] = {
    ValueType.BOOLEAN: _as_boolean,
    ValueType.INTEGER: _as_integer,
    ValueType.FLOAT: _as_float,
    ValueType.STRING: _as_string,
}


def parse_scalar(text: str, value_type: ValueType) -> Optional[Scalar]:
    """Parse trimmed text under a given scalar type.

    Returns:
        The typed scalar, or None if the text does not parse under that type
    """
    parser = _SCALAR_PARSERS.get(value_type)
    if parser is None:
        raise ValueError(f"{value_type.value} is not a scalar type")
    return parser(text)


def split_array_elements(text: str) -> List[str]:
    """Split an array literal's interior into trimmed, non-empty tokens.

    Commas always separate elements, even inside double quotes.
    """
    inner = trim_whitespace(text)[1:-1]
    tokens = [trim_whitespace(token) for token in inner.split(",")]
    return [token for token in tokens if token]


def parse_array(text: str, max_elements: int = DEFAULT_MAX_ARRAY_ELEMENTS) -> ArrayValue:
    """Parse an array literal into a homogeneous array.

    The element type comes from the first token alone. If any later token
    does not parse under that type the whole array falls back to strings.

    Args:
        text: Array literal including its brackets
        max_elements: Largest accepted element count

    Returns:
        Parsed array value

    Raises:
        UnparsableValueError: If the brackets are missing or no element is present
        ArraySizeExceededError: If there are more than ``max_elements`` elements
    """
    text = trim_whitespace(text)
    if not is_array_literal(text):
        raise UnparsableValueError(f"Malformed array literal '{text}'")

    tokens = split_array_elements(text)
    if not tokens:
        raise UnparsableValueError("Empty array")
    if len(tokens) > max_elements:
        raise ArraySizeExceededError(len(tokens), max_elements)

    element_type = infer_type(tokens[0])
    if element_type is ValueType.ARRAY:
        # Nested arrays are not supported, keep the tokens as text.
        element_type = ValueType.STRING

    items = [parse_scalar(token, element_type) for token in tokens]
    if any(item is None for item in items):
        element_type = ValueType.STRING
        items = [parse_scalar(token, element_type) for token in tokens]

    return ArrayValue(element_type, tuple(items))


def parse_value(
    raw: str,
    value_type: Optional[ValueType] = None,
    max_array_elements: int = DEFAULT_MAX_ARRAY_ELEMENTS,
) -> ConfigValue:
    """Convert a raw value string into a typed configuration value.

    Args:
        raw: Raw value string  # (right-hand side of an assignment)
        value_type: Pre-computed inferred type  # (inferred here when omitted)
        max_array_elements: Largest accepted array element count

    Returns:
        Typed configuration value

    Raises:
        UnparsableValueError: If the value is empty or does not parse under its type
        ArraySizeExceededError: If an array literal has too many elements
    """
    text = trim_whitespace(raw)
    if value_type is None:
        value_type = infer_type(text)

    if value_type is ValueType.NULL:
        raise UnparsableValueError("Missing value")
    if value_type is ValueType.ARRAY:
        return parse_array(text, max_array_elements)

    value = parse_scalar(text, value_type)
    if value is None:
        raise UnparsableValueError(f"Cannot parse '{text}' as {value_type.value}")
    return value
