"""String <-> typed value converters.

A ``ConverterRegistry`` maps a target type to a converter object exposing
``decode(text)`` and ``encode(value)``. New types are supported by
registering a converter; no existing converter needs to change::

    registry.register(Path, PathConverter())
    registry.decode(Path, "/etc/app.ini")
"""

from __future__ import annotations

import math
import re
from typing import Any, NewType, Protocol, TypeVar, runtime_checkable

from ._types import ConversionError, UnsupportedTypeError, type_name

T = TypeVar("T")

Char = NewType("Char", str)
Short = NewType("Short", int)
Long = NewType("Long", int)


@runtime_checkable
class Converter(Protocol):
    """Per-type strategy. ``decode`` raises ``ValueError`` on bad input."""

    def decode(self, text: str) -> Any:
        ...

    def encode(self, value: Any) -> str:
        ...


# ---------------------------------------------------------------------------
# Built-in converters
# ---------------------------------------------------------------------------


class BoolConverter:
    """Accepts exactly ``true``/``1`` and ``false``/``0``."""

    _TRUE = frozenset({"true", "1"})
    _FALSE = frozenset({"false", "0"})

    def decode(self, text: str) -> bool:
        if text in self._TRUE:
            return True
        if text in self._FALSE:
            return False
        raise ValueError("expected one of 'true', '1', 'false', '0'")

    def encode(self, value: Any) -> str:
        return "true" if value else "false"


class CharConverter:
    def decode(self, text: str) -> str:
        if len(text) != 1:
            raise ValueError("expected exactly one character")
        return text

    def encode(self, value: Any) -> str:
        text = str(value)
        if len(text) != 1:
            raise ValueError("expected exactly one character")
        return text


_INTEGER = re.compile(r"([+-]?)(?:0[xX]([0-9a-fA-F]+)|([0-9]+))")


class IntegerConverter:
    """Decimal or ``0x``-prefixed hexadecimal, optionally range checked."""

    def __init__(self, bits: int | None = None) -> None:
        self.bits = bits
        if bits is None:
            self.min_value = self.max_value = None
        else:
            self.min_value = -(1 << (bits - 1))
            self.max_value = (1 << (bits - 1)) - 1

    def _check_range(self, number: int) -> int:
        if self.bits is not None and not self.min_value <= number <= self.max_value:
            raise ValueError(f"out of range [{self.min_value}, {self.max_value}]")
        return number

    def decode(self, text: str) -> int:
        match = _INTEGER.fullmatch(text)
        if match is None:
            raise ValueError("not a decimal or hexadecimal integer")
        sign, hex_digits, dec_digits = match.groups()
        number = int(hex_digits, 16) if hex_digits is not None else int(dec_digits, 10)
        if sign == "-":
            number = -number
        return self._check_range(number)

    def encode(self, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return str(self._check_range(value))


_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class FloatConverter:
    """Decimal or scientific notation; only finite numbers are accepted."""

    def decode(self, text: str) -> float:
        if _FLOAT.fullmatch(text) is None:
            raise ValueError("not a decimal or scientific number")
        number = float(text)
        if not math.isfinite(number):
            raise ValueError("out of range for float")
        return number

    def encode(self, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"expected float, got {type(value).__name__}")
        number = float(value)
        if not math.isfinite(number):
            raise ValueError("not a finite number")
        return repr(number)


class StrConverter:
    def decode(self, text: str) -> str:
        return text

    def encode(self, value: Any) -> str:
        return str(value)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class ConverterRegistry:
    """Mapping from target type to ``Converter``."""

    def __init__(self, converters: dict[Any, Converter] | None = None) -> None:
        self._converters: dict[Any, Converter] = dict(converters or {})

    def register(self, type_: Any, converter: Converter) -> None:
        if not isinstance(converter, Converter):
            raise TypeError(f"{converter!r} does not provide decode() and encode()")
        self._converters[type_] = converter

    def unregister(self, type_: Any) -> Converter | None:
        return self._converters.pop(type_, None)

    def supports(self, type_: Any) -> bool:
        try:
            return type_ in self._converters
        except TypeError:
            return False

    def get(self, type_: Any) -> Converter:
        try:
            return self._converters[type_]
        except (KeyError, TypeError):
            raise UnsupportedTypeError(type_name(type_)) from None

    def copy(self) -> ConverterRegistry:
        return ConverterRegistry(self._converters)

    def _infer_type(self, value: Any) -> Any:
        # Walk the MRO so bool is matched before int.
        for candidate in type(value).__mro__:
            if candidate in self._converters:
                return candidate
        raise UnsupportedTypeError(type(value).__name__, value)

    def decode(self, type_: Any, text: str) -> Any:
        """Decode *text* into *type_*, raising ``ConversionError`` on failure."""
        converter = self.get(type_)
        try:
            return converter.decode(text)
        except ConversionError:
            raise
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise ConversionError(text, type_name(type_), str(exc) or None) from exc

    def encode(self, value: Any, type_: Any = None) -> str:
        """Encode *value*; the converter is inferred from its type if not given."""
        if type_ is None:
            type_ = self._infer_type(value)
        converter = self.get(type_)
        try:
            return converter.encode(value)
        except ConversionError:
            raise
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise ConversionError(value, type_name(type_), str(exc) or None) from exc


def _builtin_converters() -> dict[Any, Converter]:
    return {
        bool: BoolConverter(),
        Char: CharConverter(),
        Short: IntegerConverter(bits=16),
        int: IntegerConverter(),
        Long: IntegerConverter(bits=64),
        float: FloatConverter(),
        str: StrConverter(),
    }


default_registry = ConverterRegistry(_builtin_converters())


def register_converter(type_: Any, converter: Converter) -> None:
    """Register *converter* for *type_* on the default registry."""
    default_registry.register(type_, converter)
