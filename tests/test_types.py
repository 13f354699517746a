"""Tests for _types.py — UNDEFINED and exception classes."""

import copy

import pytest

from initree._types import (
    UNDEFINED,
    ConversionError,
    EmptyValueError,
    IndexOutOfBoundsError,
    IniError,
    KeyNotFoundError,
    SectionNotFoundError,
    UnsupportedTypeError,
    _Undefined,
    type_name,
)


class TestUndefined:
    def test_singleton(self):
        assert _Undefined("UNDEFINED") is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED

    def test_falsy(self):
        assert bool(UNDEFINED) is False

    def test_repr(self):
        assert repr(UNDEFINED) == "UNDEFINED"


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type, builtin",
        [
            (KeyNotFoundError, KeyError),
            (SectionNotFoundError, KeyError),
            (IndexOutOfBoundsError, IndexError),
            (ConversionError, ValueError),
            (EmptyValueError, ConversionError),
            (UnsupportedTypeError, ConversionError),
        ],
    )
    def test_subclasses(self, exc_type, builtin):
        assert issubclass(exc_type, IniError)
        assert issubclass(exc_type, builtin)


class TestMessages:
    def test_key_not_found(self):
        err = KeyNotFoundError("port")
        assert err.key == "port"
        assert str(err) == "Key 'port' not found."

    def test_section_not_found(self):
        err = SectionNotFoundError("server")
        assert err.section == "server"
        assert str(err) == "Section 'server' not found."

    def test_index_out_of_bounds(self):
        err = IndexOutOfBoundsError(3, 2)
        assert (err.index, err.length) == (3, 2)
        assert "3" in str(err) and "2" in str(err)

    def test_conversion_error_carries_text_and_type(self):
        err = ConversionError("abc", "int", "bad digits")
        assert err.text == "abc"
        assert err.type_name == "int"
        assert str(err) == "Cannot convert 'abc' to int: bad digits"

    def test_empty_value(self):
        err = EmptyValueError("int")
        assert err.type_name == "int"
        assert "empty" in str(err)

    def test_unsupported_type(self):
        err = UnsupportedTypeError("Path")
        assert err.type_name == "Path"
        assert str(err) == "No converter registered for type 'Path'."


def test_type_name():
    assert type_name(int) == "int"
    assert type_name(object()).startswith("<object")
