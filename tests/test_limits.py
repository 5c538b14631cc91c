"""Test cases for TypedConf parser limits configuration."""

import io
from pathlib import Path

import pytest

from tests.conftest import write_yaml_file
from typedconf import ConfigParser, ConfigurationError, ParserLimits, load_limits


def test_default_limits():
    limits = ParserLimits()

    assert limits.max_entries == 1000
    assert limits.max_array_elements == 100
    assert limits.max_key_length == 256
    assert limits.max_value_length == 1024


def test_load_limits_from_yaml_file(temp_dir: Path):
    """Test loading limits from YAML.

    Given a YAML file overriding two limits
    When loading it
    Then those limits change and the others keep their defaults
    """
    limits_path = temp_dir / "limits.yaml"
    write_yaml_file(limits_path, {"max_entries": 2, "max_key_length": 16})

    limits = load_limits(limits_path)

    assert limits == ParserLimits(max_entries=2, max_key_length=16)
    session = ConfigParser(limits=limits).parse_string("a = 1\nb = 2\nc = 3\n")
    assert len(session.store) == 2


def test_load_limits_from_stream():
    assert load_limits(io.StringIO("max_array_elements: 5\n")).max_array_elements == 5


def test_empty_yaml_means_defaults():
    assert load_limits(io.StringIO("")) == ParserLimits()


@pytest.mark.parametrize(
    "text",
    [
        "max_entries: 0\n",
        "max_entries: -3\n",
        "max_entries: many\n",
        "max_entries: true\n",
        "max_lines: 10\n",
        "- 1\n- 2\n",
    ],
)
def test_invalid_limits_are_rejected(text: str):
    with pytest.raises(ConfigurationError):
        load_limits(io.StringIO(text))
