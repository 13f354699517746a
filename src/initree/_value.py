"""Multi-valued key content.

A ``Value`` is an ordered list of strings. Its text form is empty, the
single element, or the elements joined with ``", "``. Typed reads and
writes go through a ``ConverterRegistry``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from ._converters import ConverterRegistry, default_registry
from ._types import EmptyValueError, IndexOutOfBoundsError, type_name

T = TypeVar("T")

_DISPLAY_SEPARATOR = ", "


class Value:
    """Ordered sequence of string elements held by one key."""

    __slots__ = ("_elements", "_registry")

    def __init__(
        self,
        elements: Iterable[str] = (),
        *,
        registry: ConverterRegistry | None = None,
    ) -> None:
        self._registry = registry or default_registry
        if isinstance(elements, str):
            elements = [elements]
        self._elements: list[str] = [str(element) for element in elements]

    @classmethod
    def of(
        cls,
        data: Any,
        type_: Any = None,
        *,
        registry: ConverterRegistry | None = None,
    ) -> Value:
        """Build a Value from a scalar, a sequence of scalars, or another Value."""
        value = cls(registry=registry)
        value.assign(data, type_)
        return value

    # -- element access -----------------------------------------------------

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int):
            raise TypeError(f"Value indices must be integers, not {type(index).__name__}")
        if index < 0 or index >= len(self._elements):
            raise IndexOutOfBoundsError(index, len(self._elements))
        return self._elements[index]

    def __bool__(self) -> bool:
        return bool(self._elements)

    def append(self, element: str) -> None:
        self._elements.append(str(element))

    def clear(self) -> None:
        self._elements.clear()

    @property
    def elements(self) -> list[str]:
        """Copy of the raw string elements."""
        return list(self._elements)

    # -- assignment ---------------------------------------------------------

    def assign(self, data: Any, type_: Any = None) -> None:
        """Replace all elements with the encoded form of *data*.

        Strings are a single element, never split into characters. Other
        iterables contribute one element per item. Each item is encoded with
        the converter for *type_*, or for its own type when *type_* is None.
        """
        if isinstance(data, Value):
            self._elements = list(data._elements)
            return
        if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
            items = [data]
        else:
            items = list(data)
        self._elements = [self._registry.encode(item, type_) for item in items]

    # -- typed access -------------------------------------------------------

    def get_as(self, type_: type[T]) -> T:
        """Decode the first element."""
        if not self._elements:
            raise EmptyValueError(type_name(type_))
        return self._registry.decode(type_, self._elements[0])

    def get_vector_as(self, type_: type[T]) -> list[T]:
        """Decode every element; the first failure aborts the whole read."""
        return [self._registry.decode(type_, element) for element in self._elements]

    # -- text form ----------------------------------------------------------

    def __str__(self) -> str:
        return _DISPLAY_SEPARATOR.join(self._elements)

    def __repr__(self) -> str:
        return f"Value({self._elements!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            return self._elements == other._elements
        if isinstance(other, str):
            return str(self) == other
        if isinstance(other, (list, tuple)):
            return self._elements == list(other)
        return NotImplemented

    __hash__ = None  # mutable
