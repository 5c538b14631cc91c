"""Test cases for TypedConf line classification."""

import pytest

from typedconf import MalformedSectionError
from typedconf.lines import LineKind, classify_line


@pytest.mark.parametrize(
    "line, kind",
    [
        ("", LineKind.BLANK),
        ("   \t ", LineKind.BLANK),
        ("# comment", LineKind.COMMENT),
        ("   ; indented comment = with equals", LineKind.COMMENT),
        ("[section]", LineKind.SECTION),
        ("  [ spaced ]  ", LineKind.SECTION),
        ("key = value", LineKind.ASSIGNMENT),
        ("key=", LineKind.ASSIGNMENT),
        ("= value", LineKind.ASSIGNMENT),
        ("[unterminated = 1", LineKind.ASSIGNMENT),
        ("just some words", LineKind.UNRECOGNIZED),
        ("[", LineKind.UNRECOGNIZED),
    ],
)
def test_classify_line_kinds(line: str, kind: LineKind):
    assert classify_line(line).kind is kind


def test_section_name_is_trimmed():
    classified = classify_line("\t[  database  ]\r")

    assert classified.kind is LineKind.SECTION
    assert classified.section == "database"


@pytest.mark.parametrize("line", ["[]", "[   ]", "  [\t]  "])
def test_empty_section_name_is_malformed(line: str):
    with pytest.raises(MalformedSectionError):
        classify_line(line)


def test_assignment_is_split_at_first_equals():
    """Test assignment splitting.

    Given an assignment whose value contains more '=' characters
    When classifying it
    Then the key and raw value are split at the first '=' and trimmed
    """
    classified = classify_line("  query =  a=b=c  ")

    assert classified.kind is LineKind.ASSIGNMENT
    assert classified.key == "query"
    assert classified.raw_value == "a=b=c"


def test_header_wins_over_assignment():
    classified = classify_line("[a = b]")

    assert classified.kind is LineKind.SECTION
    assert classified.section == "a = b"
