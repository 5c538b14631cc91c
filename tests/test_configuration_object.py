"""Test cases for TypedConf store queries and typed accessors."""

import pytest

from tests.data import samples
from typedconf import (
    CapacityExceededError,
    ConfigParser,
    ConfigStore,
    Entry,
    IntegerValue,
    StringValue,
)


def test_typed_accessors(parser: ConfigParser):
    """Test typed getters.

    Given a parsed configuration with values of every scalar type
    When reading them through the typed getters
    Then matching types return the stored value and anything else the default
    """
    session = parser.parse_string(samples.FULL)

    assert session.get_string("app_name", "default") == "My Application"
    assert session.get_float("version", 0.0) == 1.0
    assert session.get_bool("debug", False) is True
    assert session.get_int("max_connections", 0) == 100

    # Absent keys
    assert session.get_string("missing", "fallback") == "fallback"
    assert session.get_int("missing", 8080) == 8080
    assert session.get_bool("missing") is None

    # Present with another type: no coercion
    assert session.get_int("version", -1) == -1
    assert session.get_float("max_connections", -1.0) == -1.0
    assert session.get_string("debug", "x") == "x"
    assert session.get_bool("app_name", False) is False
    assert session.get_string("ports", "not a list") == "not a list"


def test_duplicate_keys_first_match_wins(parser: ConfigParser):
    """Test duplicate keys.

    Given the same key assigned several times across scopes
    When looking it up
    Then the first entry in insertion order wins within the requested scope
    """
    session = parser.parse_string(samples.DUPLICATES)

    assert len(session.store) == 5
    assert session.lookup("level") == IntegerValue(1)
    assert session.lookup_in_section(None, "level") == IntegerValue(1)
    assert session.lookup_in_section("a", "level") == IntegerValue(3)
    assert session.lookup_in_section("b", "level") == IntegerValue(4)
    assert session.lookup_in_section("c", "level") is None


def test_unscoped_lookup_searches_every_section(parser: ConfigParser):
    session = parser.parse_string(samples.SERVER)

    assert session.lookup("port") == IntegerValue(8080)
    assert session.lookup_in_section(None, "port") is None
    assert "port" in session.store
    assert "missing" not in session.store


def test_section_lookup_is_exact(parser: ConfigParser):
    session = parser.parse_string("[Server]\nport = 1\n")

    assert session.lookup_in_section("server", "port") is None
    assert session.lookup_in_section("Server", "port") == IntegerValue(1)
    assert session.lookup("Port") is None


def test_store_append_and_capacity():
    """Test the store directly.

    Given a store with room for two entries
    When appending three
    Then the third append fails and the first two are untouched
    """
    store = ConfigStore(max_entries=2)
    store.append(Entry("a", IntegerValue(1)))
    store.append(Entry("b", StringValue("x"), section="s"))

    with pytest.raises(CapacityExceededError):
        store.append(Entry("c", IntegerValue(3)))

    assert [entry.key for entry in store] == ["a", "b"]
    assert store.entries[1].section == "s"
    assert repr(store) == "ConfigStore(2 entries)"


def test_queries_do_not_mutate(parser: ConfigParser):
    session = parser.parse_string(samples.FULL)
    before = session.store.entries

    session.lookup("app_name")
    session.lookup_in_section("server", "missing")
    session.get_int("missing", 1)

    assert session.store.entries == before


def test_entry_is_immutable():
    entry = Entry("a", IntegerValue(1))

    with pytest.raises(AttributeError):
        entry.key = "b"


def test_entry_display():
    assert str(Entry("port", IntegerValue(8080), "server")) == "[server] port = 8080"
    assert str(Entry("name", StringValue("demo"))) == 'name = "demo"'


def test_to_dict(parser: ConfigParser):
    session = parser.parse_string(samples.FULL + samples.DUPLICATES)

    data = session.store.to_dict()

    assert data["global"]["app_name"] == "My Application"
    assert data["sections"]["features"]["enabled_modules"] == ["auth", "logging", "metrics"]
    assert data["sections"]["server"]["enable_ssl"] is True
    # Everything after FULL's last header belongs to [features] until [a]
    assert data["sections"]["features"]["level"] == 1
    assert data["sections"]["b"]["level"] == 4
