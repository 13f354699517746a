"""Tests for _testing.py — override_converter context manager."""

import pytest

from initree._converters import ConverterRegistry, default_registry
from initree._testing import override_converter
from initree._types import ConversionError, UnsupportedTypeError
from initree._value import Value


class YesNo:
    def decode(self, text):
        if text not in ("yes", "no"):
            raise ValueError("expected yes or no")
        return text == "yes"

    def encode(self, value):
        return "yes" if value else "no"


class TestOverrideConverter:
    def test_replaces_converter(self):
        with override_converter(bool, YesNo()):
            assert Value(["yes"]).get_as(bool) is True
            assert Value.of(False) == ["no"]

    def test_restores_previous(self):
        original = default_registry.get(bool)
        with override_converter(bool, YesNo()):
            pass
        assert default_registry.get(bool) is original
        with pytest.raises(ConversionError):
            Value(["yes"]).get_as(bool)

    def test_restores_on_error(self):
        original = default_registry.get(bool)
        with pytest.raises(RuntimeError):
            with override_converter(bool, YesNo()):
                raise RuntimeError("boom")
        assert default_registry.get(bool) is original

    def test_new_type_removed_afterwards(self):
        class Flag:
            pass

        with override_converter(Flag, YesNo()) as registry:
            assert registry is default_registry
            assert registry.supports(Flag)
        assert not default_registry.supports(Flag)
        with pytest.raises(UnsupportedTypeError):
            default_registry.decode(Flag, "yes")

    def test_custom_registry(self):
        registry = ConverterRegistry()
        with override_converter(bool, YesNo(), registry=registry):
            assert Value(["no"], registry=registry).get_as(bool) is False
            assert not isinstance(default_registry.get(bool), YesNo)
        assert not registry.supports(bool)

    def test_nested(self):
        class Upper:
            def decode(self, text):
                return text.upper()

            def encode(self, value):
                return str(value)

        with override_converter(str, Upper()):
            assert Value(["a"]).get_as(str) == "A"
            with override_converter(str, YesNo()):
                assert Value(["yes"]).get_as(str) is True
            assert Value(["a"]).get_as(str) == "A"
        assert Value(["a"]).get_as(str) == "a"

    def test_invalid_converter_keeps_previous(self):
        original = default_registry.get(int)
        with pytest.raises(TypeError):
            with override_converter(int, object()):
                pass
        assert default_registry.get(int) is original
        assert Value(["0x10"]).get_as(int) == 16
