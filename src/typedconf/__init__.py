"""TypedConf - Typed INI-style Configuration Parser.

Parses sections, key=value pairs, comments, typed scalars and homogeneous
arrays into an ordered, queryable store with post-parse validation.
"""
# ruff: noqa: F401

from .exceptions import (
    ArraySizeExceededError,
    CapacityExceededError,
    ConfigParseError,
    ConfigurationError,
    ErrorKind,
    InvalidKeyError,
    InvalidSyntaxError,
    MalformedSectionError,
    SessionAbortedError,
    TypedConfError,
    UnparsableValueError,
    ValidationFailureError,
    ValidationIssue,
)
from .inference import infer_type, parse_value
from .limits import ParserLimits, load_limits
from .parser import ConfigParser, ConfigSession, ParserState
from .store import ConfigStore, Entry
from .utils import trim_whitespace
from .validation import ConfigValidator
from .values import (
    ArrayValue,
    BooleanValue,
    ConfigValue,
    FloatValue,
    IntegerValue,
    StringValue,
    ValueType,
)

__version__ = "0.1.0"
