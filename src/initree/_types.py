"""Foundation types for initree.

Provides the ``UNDEFINED`` sentinel and the exception hierarchy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


# ---------------------------------------------------------------------------
# Sentinel
# ---------------------------------------------------------------------------


class _Undefined(Enum):
    """Marks "no default given" where ``None`` is a legitimate default."""

    token = "UNDEFINED"

    def __repr__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined.token


def type_name(type_: Any) -> str:
    """Readable name for a type or type-like object (``NewType`` included)."""
    return getattr(type_, "__name__", None) or repr(type_)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class IniError(Exception):
    """Base exception for INI document errors."""


class _LookupMessage:
    # KeyError.__str__ quotes its argument; keep messages readable.
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class KeyNotFoundError(_LookupMessage, IniError, KeyError):
    """Raised by strict access to a key that is not in the section."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key '{key}' not found.")


class SectionNotFoundError(_LookupMessage, IniError, KeyError):
    """Raised by strict access to a section that is not in the document."""

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(f"Section '{section}' not found.")


class IndexOutOfBoundsError(IniError, IndexError):
    """Raised when indexing past the end of a value."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} out of bounds for value of length {length}.")


class ConversionError(IniError, ValueError):
    """Raised when text cannot be converted to (or from) the requested type."""

    def __init__(self, text: Any, type_name: str, reason: str | None = None) -> None:
        self.text = text
        self.type_name = type_name
        message = f"Cannot convert {text!r} to {type_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class EmptyValueError(ConversionError):
    """Raised by a scalar typed read of a value with no elements."""

    def __init__(self, type_name: str) -> None:
        super().__init__("", type_name, "value is empty")


class UnsupportedTypeError(ConversionError):
    """Raised when no converter is registered for the requested type."""

    def __init__(self, type_name: str, text: Any = None) -> None:
        self.text = text
        self.type_name = type_name
        # Skip ConversionError's message; there is no text to blame.
        IniError.__init__(self, f"No converter registered for type '{type_name}'.")
