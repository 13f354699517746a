"""Tests for _value.py — element access, assignment and typed reads."""

import pytest

from initree._converters import Char, Short
from initree._types import ConversionError, EmptyValueError, IndexOutOfBoundsError, UnsupportedTypeError
from initree._value import Value


class TestTextForm:
    @pytest.mark.parametrize(
        "elements, text",
        [([], ""), (["hello"], "hello"), (["1", "2"], "1, 2"), (["a", "b", "c"], "a, b, c")],
    )
    def test_str(self, elements, text):
        assert str(Value(elements)) == text

    def test_equality(self):
        assert Value(["1", "2"]) == Value(["1", "2"])
        assert Value(["1", "2"]) == ["1", "2"]
        assert Value(["1", "2"]) == ("1", "2")
        assert Value(["1", "2"]) == "1, 2"
        assert Value(["1"]) != Value(["2"])
        assert Value([]) != 0

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Value())


class TestElements:
    def test_index(self):
        value = Value(["a", "b"])
        assert value[0] == "a"
        assert value[1] == "b"

    @pytest.mark.parametrize("index", [2, 5, -1])
    def test_out_of_bounds(self, index):
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            Value(["a", "b"])[index]
        assert exc_info.value.length == 2

    def test_out_of_bounds_is_index_error(self):
        with pytest.raises(IndexError):
            Value()[0]

    def test_append_and_clear(self):
        value = Value()
        value.append("x")
        value.append("y")
        assert len(value) == 2
        assert list(value) == ["x", "y"]
        value.clear()
        assert len(value) == 0
        assert not value

    def test_string_argument_is_one_element(self):
        assert Value("hello").elements == ["hello"]
        assert len(Value("")) == 1

    def test_elements_is_a_copy(self):
        value = Value(["a"])
        value.elements.append("b")
        assert value == ["a"]


class TestAssign:
    def test_scalar(self):
        assert Value.of(42) == ["42"]
        assert Value.of(True) == ["true"]
        assert Value.of(2.5) == ["2.5"]

    def test_string_is_one_element(self):
        assert Value.of("hello") == ["hello"]

    def test_list_and_tuple(self):
        assert Value.of([1, 2, 3]) == ["1", "2", "3"]
        assert Value.of((True, False)) == ["true", "false"]

    def test_generator(self):
        assert Value.of(n * 2 for n in range(3)) == ["0", "2", "4"]

    def test_assign_replaces(self):
        value = Value(["old", "stuff"])
        value.assign(7)
        assert value == ["7"]

    def test_assign_from_value_copies(self):
        source = Value(["a", "b"])
        target = Value.of(source)
        source.append("c")
        assert target == ["a", "b"]

    def test_explicit_type(self):
        assert Value.of(["x", "y"], Char) == ["x", "y"]
        with pytest.raises(ConversionError):
            Value.of("xy", Char)
        with pytest.raises(ConversionError):
            Value.of(70000, Short)

    def test_unsupported(self):
        with pytest.raises(UnsupportedTypeError):
            Value.of(object())


class TestTypedRead:
    def test_get_as(self):
        assert Value(["0x10", "5"]).get_as(int) == 16
        assert Value(["true"]).get_as(bool) is True
        assert Value(["c"]).get_as(Char) == "c"

    def test_get_as_empty(self):
        with pytest.raises(EmptyValueError):
            Value().get_as(int)

    def test_get_as_invalid(self):
        with pytest.raises(ConversionError) as exc_info:
            Value(["notanumber"]).get_as(int)
        assert exc_info.value.text == "notanumber"

    def test_get_vector_as(self):
        assert Value(["1", "0x2", "-3"]).get_vector_as(int) == [1, 2, -3]
        assert Value().get_vector_as(int) == []

    def test_get_vector_as_is_all_or_nothing(self):
        with pytest.raises(ConversionError) as exc_info:
            Value(["1", "x", "y"]).get_vector_as(int)
        assert exc_info.value.text == "x"
