"""Utility functions for TypedConf."""

import re
from typing import Any

import yaml

# ASCII whitespace as understood by C's isspace() in the "C" locale.
WHITESPACE = " \t\n\r\f\v"

_KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")


def load_yaml(stream: Any) -> Any:
    """Load YAML content from a stream.

    Args:
        stream: Stream to read YAML from  # (file-like object or string)
    Returns:
        Parsed YAML content  # (dict for a mapping document, None for an empty one)
    """
    return yaml.safe_load(stream)


def dump_yaml(data: Any) -> str:
    """Render plain Python data as block-style YAML."""
    return yaml.safe_dump(data, default_flow_style=False, indent=2, sort_keys=False)


def trim_whitespace(text: str) -> str:
    """Strip leading and trailing ASCII whitespace.

    Unicode spaces such as U+00A0 are kept, they are part of the value.
    """
    return text.strip(WHITESPACE)


def strip_quotes(text: str) -> str:
    """Remove exactly one layer of surrounding double quotes, if present."""
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def is_valid_identifier(name: str, max_length: int) -> bool:
    """Check the key/section syntax rule.

    Args:
        name: Key or section name to check
        max_length: Longest accepted name

    Returns:
        True if the name is non-empty, short enough, starts with a letter or
        underscore and continues with letters, digits, underscores or dots
    """
    if not name or len(name) > max_length:
        return False
    return _KEY_PATTERN.fullmatch(name) is not None
