"""Pytest configuration and shared fixtures for TypedConf tests."""

import tempfile
from pathlib import Path
from typing import Any, Dict, Iterator

import pytest
import yaml
from typedconf import ConfigParser, ParserLimits


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def parser() -> ConfigParser:
    """Create a lenient ConfigParser instance."""
    return ConfigParser()


@pytest.fixture
def strict_parser() -> ConfigParser:
    """Create a ConfigParser that aborts on the first error."""
    return ConfigParser(strict=True)


@pytest.fixture
def small_limits() -> ParserLimits:
    """Create tight limits so capacity errors are cheap to trigger."""
    return ParserLimits(max_entries=3, max_array_elements=4, max_key_length=8, max_value_length=10)


def write_config_file(file_path: Path, text: str) -> None:
    """Write configuration text to a file.

    Args:
        file_path: Path to write file
        text: Configuration text to write
    """
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(text)


def write_yaml_file(file_path: Path, data: Dict[str, Any]) -> None:
    """Write data to YAML file.

    Args:
        file_path: Path to write file
        data: Data to write
    """
    with open(file_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False)
