"""
Tests for the leaf helpers: lexical detectors, value kinds and the JSON
bridge.

    §1  Integer / numeric grammars
    §2  Character tables
    §3  Value kinds
    §4  Same-kind comparisons
    §5  JSON bridge & representation
"""

import sys
import os
import logging
from enum import IntEnum
from types import MappingProxyType

import pytest

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from structtraverse.detector import is_integer, is_numeric_strict, parse_integer, validate_string
from structtraverse.kinds import (
    ValueKind, is_instance_of, is_same_type, is_valid_kind, kind_of,
)
from structtraverse.formats import (
    UNSERIALIZABLE, dump_json, is_type_failure, load_json, representation,
)


class Color(IntEnum):
    RED = 1


# ═══════════════════════════════════════════════════════════════════
#  §1  INTEGER / NUMERIC GRAMMARS
# ═══════════════════════════════════════════════════════════════════

class TestGrammars:

    @pytest.mark.parametrize("text,expected", [
        ("0", True),
        ("-0", True),
        ("7", True),
        ("-7", True),
        ("1000", True),
        ("007", False),
        ("01", False),
        ("7.0", False),
        ("", False),
        ("-", False),
        ("--1", False),
        ("+1", False),
        ("1 ", False),
        ("1\n", False),
        ("١", False),
    ])
    def test_is_integer(self, text, expected):
        assert is_integer(text) is expected

    @pytest.mark.parametrize("text,expected", [
        ("0", True),
        ("1000", True),
        ("0111", False),
        ("-0.2", True),
        (".2", False),
        ("0.25", True),
        ("1.", False),
        ("1.2.3", False),
        ("-0", True),
        ("1e3", False),
        ("00.5", False),
    ])
    def test_is_numeric_strict(self, text, expected):
        assert is_numeric_strict(text) is expected

    @pytest.mark.parametrize("text,expected", [
        ("0", 0),
        ("-0", 0),
        ("-7", -7),
        ("1" + "0" * 999, 10 ** 999),
        ("1" + "0" * 1000, 10 ** 1000),
        ("-1" + "0" * 2000, -10 ** 2000),
    ])
    def test_parse_integer(self, text, expected):
        assert parse_integer(text) == expected

    def test_parse_integer_past_int_digit_limit(self):
        text = "12" * 3000
        assert is_integer(text)
        assert parse_integer(text) == 12 * (10 ** 6000 - 1) // 99

    def test_every_integer_is_numeric(self):
        for n in range(-50, 51):
            assert is_integer(str(n))
            assert is_numeric_strict(str(n))


# ═══════════════════════════════════════════════════════════════════
#  §2  CHARACTER TABLES
# ═══════════════════════════════════════════════════════════════════

class TestCharTable:

    def test_valid(self):
        assert validate_string("deadbeef", "0123456789abcdef")

    def test_invalid(self):
        assert not validate_string("xyz", "0123456789abcdef")

    def test_empty_text(self):
        assert validate_string("", "")

    def test_empty_table(self):
        assert not validate_string("a", "")


# ═══════════════════════════════════════════════════════════════════
#  §3  VALUE KINDS
# ═══════════════════════════════════════════════════════════════════

class TestValueKinds:

    @pytest.mark.parametrize("value,kind", [
        (1, ValueKind.NUMERIC),
        (1.5, ValueKind.NUMERIC),
        (True, ValueKind.BOOLEAN),
        ("s", ValueKind.STRING),
        ([1], ValueKind.SEQUENCE),
        ({"a": 1}, ValueKind.OBJECT),
        (MappingProxyType({}), ValueKind.MAP),
        (3, int),
        (2.0, float),
        ({}, dict),
    ])
    def test_matches(self, value, kind):
        assert is_instance_of(value, kind)

    @pytest.mark.parametrize("value,kind", [
        (True, ValueKind.NUMERIC),
        (Color.RED, ValueKind.NUMERIC),
        (1, ValueKind.BOOLEAN),
        (b"s", ValueKind.STRING),
        ((1,), ValueKind.SEQUENCE),
        (MappingProxyType({}), ValueKind.OBJECT),
        ({}, ValueKind.MAP),
        (True, int),
        (Color.RED, int),
        (1, float),
        (None, ValueKind.NUMERIC),
    ])
    def test_mismatches(self, value, kind):
        assert not is_instance_of(value, kind)

    def test_valid_kinds(self):
        assert is_valid_kind(ValueKind.MAP)
        assert is_valid_kind(dict)
        assert not is_valid_kind("dict")
        assert not is_valid_kind(None)

    def test_kind_of(self):
        assert kind_of(1) is ValueKind.NUMERIC
        assert kind_of(1.0) is ValueKind.NUMERIC
        assert kind_of(False) is ValueKind.BOOLEAN
        assert kind_of("") is ValueKind.STRING
        assert kind_of([]) is list
        assert kind_of(Color.RED) is Color


# ═══════════════════════════════════════════════════════════════════
#  §4  SAME-KIND COMPARISONS
# ═══════════════════════════════════════════════════════════════════

class TestSameType:

    @pytest.mark.parametrize("a,b,expected", [
        (3, 2.5, True),
        (2.5, 3, True),
        (True, 1, False),
        (1, True, False),
        ("a", "b", True),
        ("1", 1, False),
        (None, None, True),
        (None, 0, False),
        (0, None, False),
        ([1], [], True),
        ({}, [], False),
    ])
    def test_pairs(self, a, b, expected):
        assert is_same_type(a, b) is expected

    def test_subclass_against_base(self):
        class Base:
            pass

        class Derived(Base):
            pass

        assert is_same_type(Derived(), Base())
        assert not is_same_type(Base(), Derived())


# ═══════════════════════════════════════════════════════════════════
#  §5  JSON BRIDGE & REPRESENTATION
# ═══════════════════════════════════════════════════════════════════

class TestJsonBridge:

    def test_load(self):
        assert load_json('{"a": [1, 2.5, null]}') == {"a": [1, 2.5, None]}

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", "-Infinity", "{", ""])
    def test_load_rejects(self, text):
        with pytest.raises(ValueError):
            load_json(text)

    def test_dump_compact_unicode(self):
        assert dump_json({"k": ["ü", 1]}) == '{"k":["ü",1]}'

    def test_dump_failures_classified(self):
        with pytest.raises(TypeError) as info:
            dump_json({1, 2})
        assert is_type_failure(info.value)

        cyclic = []
        cyclic.append(cyclic)
        with pytest.raises(ValueError) as info:
            dump_json(cyclic)
        assert is_type_failure(info.value)

        with pytest.raises(ValueError) as info:
            dump_json(float("inf"))
        assert not is_type_failure(info.value)

    @pytest.mark.parametrize("value,expected", [
        (42, "42"),
        ("key", '"key"'),
        ((1, 2), "[1,2]"),
        (None, "null"),
        (object(), UNSERIALIZABLE),
        (float("nan"), UNSERIALIZABLE),
    ])
    def test_representation(self, value, expected):
        assert representation(value) == expected

    def test_representation_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="structtraverse.formats"):
            representation(object())
        assert any("No JSON representation" in r.message for r in caplog.records)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
